"""
Health check: жив ли сервис, отвечает ли Mongo, куда смотрит меню.

Эндпоинт для оркестраторов (Docker, k8s) и мониторинга.
"""
from fastapi import APIRouter
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.database import get_client
from app.schemas.common import SuccessResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=SuccessResponse[dict])
def health():
    """Статус сервиса, MongoDB и имя коллекции меню (db.collection)."""
    try:
        get_client().admin.command("ping")
        mongo = "connected"
    except (RuntimeError, PyMongoError):
        mongo = "disconnected"
    return SuccessResponse(
        data={
            "status": "ok",
            "mongo": mongo,
            "menu_collection": f"{settings.MONGO_DB_NAME}.{settings.MONGO_COLLECTION}",
        }
    )
