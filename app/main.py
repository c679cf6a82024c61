# app/main.py
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from app.api import api_router
from app.api.errors import register_error_handlers
from app.api.routers import health
from app.data.database import init_db
from app.utils.settings import MEDIA_DIR, MEDIA_URL_PREFIX, SEED_DEMO_DATA, PORT
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    init_db()
    if SEED_DEMO_DATA:
        from app.data.seed import seed
        seed()

    app = FastAPI(
        title="Bookstore Marketplace API",
        version="1.0.0",
    )

    # klient mobilny, dowolny origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(api_router)

    Path(MEDIA_DIR).mkdir(parents=True, exist_ok=True)
    app.mount(MEDIA_URL_PREFIX, StaticFiles(directory=MEDIA_DIR), name="media")

    @app.get("/", include_in_schema=False)
    def root():
        return {"message": "Multi-Seller Bookstore API is running"}

    logger.info("Bookstore API ready")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
