# app/api/routers/seller.py
from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from app.api.deps import require_seller
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import (
    BookCreatedOut,
    BookOut,
    BookWithSellerOut,
    OrderOut,
    SellerOrderOut,
    StatusUpdateIn,
    StatusUpdateOut,
)
from app.services.catalog_service import CatalogService
from app.services.media_storage import MediaStorage
from app.services.order_service import OrderService

router = APIRouter(prefix="/seller", tags=["seller"])


def get_media_storage() -> MediaStorage:
    return MediaStorage()


@router.get("/all-books", response_model=List[BookWithSellerOut])
def my_books(
    seller: UserModel = Depends(require_seller),
    db: Session = Depends(get_db),
):
    books = CatalogService(db).list_mine(seller.id)
    return [BookWithSellerOut.model_validate(b) for b in books]


@router.post("/add-book", response_model=BookCreatedOut, status_code=201)
def add_book(
    title: str = Form(...),
    description: str = Form(""),
    # tekst, parsowany w serwisie zeby zwrocic ValidationError
    price: str = Form(...),
    stock: str = Form(...),
    cover_image: UploadFile | None = File(None, alias="coverImage"),
    seller: UserModel = Depends(require_seller),
    db: Session = Depends(get_db),
    storage: MediaStorage = Depends(get_media_storage),
):
    service = CatalogService(db)

    image_url = None
    if cover_image is not None and cover_image.filename:
        image_url = storage.save_image(
            cover_image.file.read(),
            cover_image.content_type,
            cover_image.filename,
        )

    try:
        book = service.create(
            seller_id=seller.id,
            title=title,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
        )
    except Exception:
        # bez ksiazki okladka jest osierocona
        if image_url:
            storage.discard(image_url)
        raise
    return BookCreatedOut(book=BookOut.model_validate(book))


@router.get("/orders", response_model=List[SellerOrderOut])
def orders(
    seller: UserModel = Depends(require_seller),
    db: Session = Depends(get_db),
):
    items = OrderService(db).list_for_seller(seller.id)
    return [SellerOrderOut.model_validate(o) for o in items]


@router.put("/orders/{order_id}/status", response_model=StatusUpdateOut)
def update_order_status(
    order_id: int,
    payload: StatusUpdateIn,
    seller: UserModel = Depends(require_seller),
    db: Session = Depends(get_db),
):
    order = OrderService(db).update_status(seller.id, order_id, payload.status)
    return StatusUpdateOut(order=OrderOut.model_validate(order))
