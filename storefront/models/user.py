from typing import Optional
from enum import Enum
from sqlmodel import Field, SQLModel

class UserRole(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"

class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    password_hash: str
    role: UserRole = Field(default=UserRole.CUSTOMER)


class UserCreate(SQLModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: UserRole = UserRole.CUSTOMER

class UserLogin(SQLModel):
    username: str
    password: str

class Token(SQLModel):
    token: str
