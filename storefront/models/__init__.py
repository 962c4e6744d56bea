# Import all models to register them with SQLModel
from storefront.models.user import User, UserRole, UserCreate, UserLogin, Token
from storefront.models.product import Product, ProductRead
from storefront.models.cart import ShoppingCart, CartLine, CartRead, AddToCartRequest, CartTotal

__all__ = [
    "User",
    "UserRole",
    "UserCreate",
    "UserLogin",
    "Token",
    "Product",
    "ProductRead",
    "ShoppingCart",
    "CartLine",
    "CartRead",
    "AddToCartRequest",
    "CartTotal",
]
