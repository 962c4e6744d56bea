from typing import List
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlmodel import Session

from storefront.core.exceptions import BadRequestError
from storefront.core.security import Identity
from storefront.db.session import get_session
from storefront.models.product import ProductRead
from storefront.routers.auth import require_admin
from storefront.services.product import ProductService

router = APIRouter()

def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)


@router.post("/add-product", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def add_product(
    request: Request,
    name: str = Form(...),
    description: str = Form(...),
    price: float = Form(...),
    images: List[UploadFile] = File(default=[]),
    current_user: Identity = Depends(require_admin),
    service: ProductService = Depends(get_product_service),
):
    """Create a product from multipart form fields. Admin only."""
    max_images = request.app.state.settings.MAX_PRODUCT_IMAGES
    if len(images) > max_images:
        raise BadRequestError(f"At most {max_images} images are allowed")

    contents = [image.file.read() for image in images]
    return service.create_product(name, description, price, contents)

@router.get("/products", response_model=List[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)):
    return service.list_products()
