from typing import List, Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON

class ProductBase(SQLModel):
    name: str = Field(index=True)
    description: str
    price: float

class Product(ProductBase, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Base64-encoded image payloads, in upload order
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))

class ProductRead(ProductBase):
    id: int
    images: List[str] = []
