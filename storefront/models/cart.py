from typing import List, Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON

class CartLine(SQLModel):
    productId: int
    quantity: int

class ShoppingCart(SQLModel, table=True):
    __tablename__ = "shopping_carts"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", unique=True, index=True)

    # Cart lines stored as [{"productId": ..., "quantity": ...}, ...]
    products: List[dict] = Field(default_factory=list, sa_column=Column(JSON))


class CartRead(SQLModel):
    id: int
    user_id: int
    products: List[CartLine] = []

class AddToCartRequest(CartLine):
    pass

class CartTotal(SQLModel):
    total: float
