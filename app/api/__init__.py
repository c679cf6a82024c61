# app/api/__init__.py
from fastapi import APIRouter

from app.api.routers import users, buyer, seller

api_router = APIRouter(prefix="/api")
api_router.include_router(users.router)
api_router.include_router(buyer.router)
api_router.include_router(seller.router)
