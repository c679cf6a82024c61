# app/api/routers/buyer.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import (
    AddToCartIn,
    AddToCartOut,
    BookWithSellerOut,
    BuyerOrderOut,
    CartItemOut,
    CartItemWithBookOut,
    OrderOut,
    PlaceOrderOut,
)
from app.services.cart_service import CartService
from app.services.catalog_service import CatalogService
from app.services.order_service import OrderService

router = APIRouter(prefix="/buyer", tags=["buyer"])


@router.get("/all-books", response_model=List[BookWithSellerOut])
def all_books(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    books = CatalogService(db).list_all()
    return [BookWithSellerOut.model_validate(b) for b in books]


@router.post("/add-to-cart", response_model=AddToCartOut)
def add_to_cart(
    payload: AddToCartIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = CartService(db).add(user.id, payload.book_id, payload.quantity)
    return AddToCartOut(cart_item=CartItemOut.model_validate(item))


@router.get("/cart", response_model=List[CartItemWithBookOut])
def cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    items = CartService(db).list(user.id)
    return [CartItemWithBookOut.model_validate(i) for i in items]


@router.post("/place-order", response_model=PlaceOrderOut)
def place_order(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Zamienia caly koszyk na zamowienia w jednej transakcji.
    """
    orders = OrderService(db).place_order(user.id)
    return PlaceOrderOut(orders=[OrderOut.model_validate(o) for o in orders])


@router.get("/my-order", response_model=List[BuyerOrderOut])
def my_orders(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    orders = OrderService(db).list_for_buyer(user.id)
    return [BuyerOrderOut.model_validate(o) for o in orders]
