# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated, List
from decimal import Decimal
from datetime import datetime

from app.data.models.enums import Role, OrderStatus

# w JSON liczba, klient mobilny oczekuje number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    """JSON keys w camelCase, tak jak oczekuje klient mobilny."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# USERS
# =====================================================
class SignupIn(ApiModel):
    role: Role
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class LoginIn(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(ApiModel):
    """Publiczna tozsamosc uzytkownika, bez hasla."""

    id: int
    name: str
    email: str
    role: Role


class AuthOut(ApiModel):
    success: bool = True
    message: str
    token: str
    user: UserOut


class CheckOut(ApiModel):
    success: bool = True
    user: UserOut


# =====================================================
# BOOKS
# =====================================================
class BookOut(ApiModel):
    id: int
    seller_id: int
    title: str
    description: str
    price: Money
    stock: int
    image_url: str | None = None


class BookWithSellerOut(BookOut):
    seller: UserOut


class BookCreatedOut(ApiModel):
    success: bool = True
    book: BookOut


# =====================================================
# CART
# =====================================================
class AddToCartIn(ApiModel):
    book_id: int = Field(..., gt=0)
    quantity: int = Field(1, gt=0)


class CartItemOut(ApiModel):
    id: int
    buyer_id: int
    book_id: int
    quantity: int


class CartItemWithBookOut(CartItemOut):
    book: BookOut


class AddToCartOut(ApiModel):
    success: bool = True
    cart_item: CartItemOut


# =====================================================
# ORDERS
# =====================================================
class OrderOut(ApiModel):
    id: int
    buyer_id: int
    seller_id: int
    book_id: int
    quantity: int
    unit_price: Money
    status: OrderStatus
    created_at: datetime
    updated_at: datetime


class BuyerOrderOut(OrderOut):
    """Zamowienie widziane przez kupujacego: ksiazka i sprzedawca."""

    book: BookOut
    seller: UserOut


class SellerOrderOut(OrderOut):
    """Zamowienie widziane przez sprzedawce: ksiazka i kupujacy."""

    book: BookOut
    buyer: UserOut


class PlaceOrderOut(ApiModel):
    success: bool = True
    orders: List[OrderOut]


class StatusUpdateIn(ApiModel):
    # walidacja w serwisie, zly status to InvalidStatusError a nie blad schematu
    status: str


class StatusUpdateOut(ApiModel):
    success: bool = True
    order: OrderOut

