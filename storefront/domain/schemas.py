# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, List
from decimal import Decimal
from datetime import datetime


class ApiResponse(BaseModel):
    """Koperta odpowiedzi: message, success, opcjonalnie data/error."""

    message: str
    success: bool
    data: Any | None = None
    error: str | None = None


class LoginResponse(ApiResponse):
    token: str | None = None


# users

class UserRegister(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1, max_length=72)  # bcrypt tnie po 72 bajtach


class UserLogin(BaseModel):
    email: str
    password: str


class UserRead(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


# catalog

class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None


class CategoryOut(BaseModel):
    id: int
    name: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Schema dla dodawania produktu, kategoria podawana po nazwie."""

    title: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    description: str
    availability: bool = True
    category_type: str = Field(..., alias="categoryType")

    model_config = ConfigDict(populate_by_name=True)


class ProductSummary(BaseModel):
    title: str
    price: float
    description: str
    availability: bool

    model_config = ConfigDict(from_attributes=True)


class ProductOut(ProductSummary):
    id: int
    category_id: int = Field(..., serialization_alias="categoryId")


# cart

class CartUpdateIn(BaseModel):
    quantity: int


class CartItemOut(BaseModel):
    product_id: int = Field(..., serialization_alias="productId")
    quantity: int
    product: ProductOut | None = None

    model_config = ConfigDict(from_attributes=True)


# orders

class OrderItemOut(BaseModel):
    product_id: int = Field(..., serialization_alias="productId")
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    user_id: int = Field(..., serialization_alias="userId")
    status: str
    items: List[OrderItemOut] = Field(..., serialization_alias="lineItems")
    created_at: datetime = Field(..., serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)
