"""
Доступ к коллекции позиций меню.

Единственное место, где код ходит в Mongo за MenuItem. Правила:
- каждая изменяющая операция сначала проверяет наличие записи по id, потом действует;
- "не найдено" / "уже есть" — это False, а не исключение;
- любой сбой драйвера — StorageError; коллекция отпускается на любом выходе.
"""
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager

from bson.errors import BSONError
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.database import menu_items_session
from app.core.errors import MenuItemError, StorageError
from app.models.menu_item import MenuItem

SessionFactory = Callable[[], AbstractContextManager[Collection]]

# В ответах Mongo _id не нужен: ключ — поле id
_PROJECTION = {"_id": 0}


class MenuItemAccessor:
    """CRUD по ключу id поверх коллекции menuitems."""

    def __init__(self, session_factory: SessionFactory = menu_items_session):
        self._session_factory = session_factory

    @contextmanager
    def _collection(self, operation: str) -> Iterator[Collection]:
        try:
            with self._session_factory() as coll:
                yield coll
        except (PyMongoError, BSONError) as exc:
            raise StorageError(operation, exc) from exc
        except MenuItemError as exc:
            # документ в базе не проходит валидацию — это сбой данных, не ошибка клиента
            raise StorageError(operation, exc) from exc

    def get_all_items(self) -> list[MenuItem]:
        """Все позиции по возрастанию id. Пустой список, если коллекция пуста."""
        with self._collection("get_all_items") as coll:
            cursor = coll.find({}, _PROJECTION).sort("id", ASCENDING)
            return [MenuItem.from_dict(doc) for doc in cursor]

    def get_item_by_id(self, item_id: int) -> MenuItem | None:
        """Позиция с данным id или None."""
        with self._collection("get_item_by_id") as coll:
            doc = coll.find_one({"id": item_id}, _PROJECTION)
            return MenuItem.from_dict(doc) if doc else None

    def item_exists(self, item: MenuItem) -> bool:
        """True, если в коллекции ровно одна запись с таким id."""
        with self._collection("item_exists") as coll:
            return coll.count_documents({"id": item.id}) == 1

    def add_item(self, item: MenuItem) -> bool:
        """Добавить позицию. False, если id уже занят (вставка не выполняется)."""
        with self._collection("add_item") as coll:
            if coll.find_one({"id": item.id}) is not None:
                return False
            result = coll.insert_one(item.to_dict())
            return result.acknowledged

    def update_item(self, item: MenuItem) -> bool:
        """Перезаписать все поля, кроме id. False, если записи с таким id нет."""
        query = {"id": item.id}
        values = {
            "$set": {
                "category": item.category,
                "description": item.description,
                "price": item.price,
                "vegetarian": item.vegetarian,
            }
        }
        with self._collection("update_item") as coll:
            if coll.find_one(query) is None:
                return False
            result = coll.update_one(query, values)
            return result.matched_count == 1

    def delete_item(self, item: MenuItem) -> bool:
        """Удалить позицию по id. False, если записи с таким id нет."""
        return self._delete("delete_item", item.id)

    def delete_item_by_id(self, item_id: int) -> bool:
        """То же по одному ключу: документ не читается в MenuItem, удаляется и битая запись."""
        return self._delete("delete_item_by_id", item_id)

    def _delete(self, operation: str, item_id: int) -> bool:
        query = {"id": item_id}
        with self._collection(operation) as coll:
            if coll.find_one(query) is None:
                return False
            result = coll.delete_one(query)
            return result.deleted_count == 1


def get_menu_item_accessor() -> MenuItemAccessor:
    """Зависимость FastAPI: accessor поверх общего пула."""
    return MenuItemAccessor()
