import base64
from typing import List

import structlog
from sqlmodel import Session, select

from storefront.models.product import Product

logger = structlog.get_logger(__name__)


def encode_image(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


class ProductService:
    def __init__(self, session: Session):
        self.session = session

    def create_product(self, name: str, description: str, price: float, images: List[bytes]) -> Product:
        product = Product(
            name=name,
            description=description,
            price=price,
            images=[encode_image(content) for content in images],
        )
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)

        logger.info("product_created", product_id=product.id, images=len(product.images))
        return product

    def list_products(self) -> List[Product]:
        return self.session.exec(select(Product)).all()
