"""
Сущность MenuItem — позиция меню ресторана.

Неизменяемый объект-значение: создаётся на каждый запрос или на каждый документ из Mongo.
Валидация в фиксированном порядке, первая же ошибка — единственное сообщение.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from app.core.errors import MenuItemError

MIN_ID = 100
MAX_ID = 999
CATEGORY_LENGTH = 3
# Mongo хранит целые только как int64
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _is_integer(value: Any) -> bool:
    # bool — подкласс int, но id=True не принимаем
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return INT64_MIN <= value <= INT64_MAX
    return math.isfinite(value)


@dataclass(frozen=True)
class MenuItem:
    """Позиция меню. id — бизнес-ключ в [100, 999], не Mongo _id."""

    id: int
    category: str
    description: str
    price: float
    vegetarian: bool = False

    def __post_init__(self) -> None:
        err = self.check_args(self.id, self.category, self.description, self.price, self.vegetarian)
        if err:
            raise MenuItemError(err)

    @staticmethod
    def check_args(id: Any, category: Any, description: Any, price: Any, vegetarian: Any) -> str | None:
        """Вернуть первую нарушенную проверку или None. Порядок проверок — часть контракта."""
        if id is None:
            return "id must be defined"
        if not _is_integer(id):
            return "id must be an integer"
        if id < MIN_ID or id > MAX_ID:
            return f"id must be in range [{MIN_ID},{MAX_ID}]"
        if category is None:
            return "category must be defined"
        if not isinstance(category, str):
            return "category must be a string"
        if len(category) != CATEGORY_LENGTH:
            return "category must be three characters"
        if description is None:
            return "description must be defined"
        if not isinstance(description, str):
            return "description must be a string"
        if not description:
            return "description must be non-empty"
        if price is None:
            return "price must be defined"
        if not _is_number(price):
            return "price must be a number"
        if price < 0:
            return "price must be non-negative"
        if vegetarian is None:
            return "vegetarian must be defined"
        if not isinstance(vegetarian, bool):
            return "vegetarian must be a boolean"
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MenuItem:
        """Тело запроса или документ Mongo -> MenuItem. Лишние ключи (_id) игнорируются."""
        return cls(
            data.get("id"),
            data.get("category"),
            data.get("description"),
            data.get("price"),
            data.get("vegetarian", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Форма записи: одна и та же для Mongo и для JSON-ответа."""
        return asdict(self)

    def to_csv(self) -> str:
        veg = "true" if self.vegetarian else "false"
        return f"{self.id}, {self.category}, {self.description}, {self.price}, {veg}"

    def format_item(self) -> str:
        """Строка для печатного меню: '\\t<описание> (ID: <id>): <цена> (veg)'."""
        veg = " (veg)" if self.vegetarian else ""
        return f"\t{self.description} (ID: {self.id}): {self.price}{veg}"
