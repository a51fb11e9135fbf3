# schemas — Pydantic-модели для ответа API. Валидация и сериализация из коробки.
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.menu_item import MenuItemOut

__all__ = ["SuccessResponse", "ErrorResponse", "MenuItemOut"]
