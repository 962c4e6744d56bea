from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.security import Identity
from storefront.db.session import get_session
from storefront.models.cart import AddToCartRequest, CartRead, CartTotal
from storefront.routers.auth import get_current_user
from storefront.services.cart import CartService

router = APIRouter()

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)


@router.post("/add-to-cart", response_model=CartRead)
def add_to_cart(
    line: AddToCartRequest,
    current_user: Identity = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """Append a line to the current user's cart"""
    return service.add_to_cart(current_user.id, line.productId, line.quantity)

@router.get("/get-cart", response_model=CartRead)
def get_cart(current_user: Identity = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    return service.get_cart(current_user.id)

@router.get("/calculate-total", response_model=CartTotal)
def calculate_total(current_user: Identity = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    return CartTotal(total=service.calculate_total(current_user.id))
