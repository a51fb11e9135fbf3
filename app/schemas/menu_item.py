"""
Схема ответа для позиции меню.

Тело запроса разбирает сама сущность MenuItem (порядок проверок важен),
здесь только форма данных в ответе API — та же, что и документ в Mongo.
"""
from pydantic import BaseModel, Field

from app.models.menu_item import MenuItem


class MenuItemOut(BaseModel):
    """Позиция меню в ответе API."""

    id: int = Field(..., ge=100, le=999)
    category: str = Field(..., min_length=3, max_length=3)
    description: str
    price: int | float = Field(..., ge=0)
    vegetarian: bool = False

    @classmethod
    def from_entity(cls, item: MenuItem) -> "MenuItemOut":
        return cls(**item.to_dict())
