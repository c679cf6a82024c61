# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bookstore.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_TASK_ALWAYS_EAGER = _flag("CELERY_TASK_ALWAYS_EAGER")

# empty means "generate one per process", see app/utils/security.py
JWT_SECRET = os.getenv("JWT_SECRET", "")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_TTL_SECONDS = int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", 7 * 24 * 60 * 60))

MEDIA_DIR = os.getenv("MEDIA_DIR", "./media")
MEDIA_URL_PREFIX = os.getenv("MEDIA_URL_PREFIX", "/media")
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", 10 * 1024 * 1024))

ORDER_LOCK_TIMEOUT_MS = int(os.getenv("ORDER_LOCK_TIMEOUT_MS", 5000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEED_DEMO_DATA = _flag("SEED_DEMO_DATA")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
PORT = int(os.getenv("PORT", 8000))
