from typing import Optional

import structlog
from sqlmodel import Session, select

from storefront.core.exceptions import NotFoundError
from storefront.models.cart import ShoppingCart
from storefront.models.product import Product

logger = structlog.get_logger(__name__)


class CartService:
    def __init__(self, session: Session):
        self.session = session

    def find_cart(self, user_id: int) -> Optional[ShoppingCart]:
        return self.session.exec(select(ShoppingCart).where(ShoppingCart.user_id == user_id)).first()

    def get_cart(self, user_id: int) -> ShoppingCart:
        cart = self.find_cart(user_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return cart

    def add_to_cart(self, user_id: int, product_id: int, quantity: int) -> ShoppingCart:
        """
        Append a line to the user's cart, creating the cart on first use.

        Lines are never merged: adding the same product twice yields two
        lines. This is a plain read-modify-write with no row lock, so two
        concurrent calls for the same user can lose one of the lines.
        """
        line = {"productId": product_id, "quantity": quantity}
        cart = self.find_cart(user_id)

        if cart is None:
            cart = ShoppingCart(user_id=user_id, products=[line])
        else:
            # Assign a new list so the JSON column is flagged dirty
            cart.products = [*cart.products, line]

        self.session.add(cart)
        self.session.commit()
        self.session.refresh(cart)

        logger.info("cart_updated", user_id=user_id, product_id=product_id, lines=len(cart.products))
        return cart

    def calculate_total(self, user_id: int) -> float:
        cart = self.get_cart(user_id)

        total = 0.0
        for line in cart.products or []:
            product = self.session.get(Product, line["productId"])
            if product is None:
                raise NotFoundError(f"Product {line['productId']} not found")
            total += product.price * line["quantity"]
        # Totals are money amounts, kept to cents
        return round(total, 2)
