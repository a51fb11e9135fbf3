"""
Подключение к MongoDB.

Один пул (MongoClient) на приложение, подключение при старте (lifespan в main).
Доступ к коллекции — через menu_items_session(): взять на время операции и отпустить.
URI и имена только из config (.env).
"""
from collections.abc import Iterator
from contextlib import contextmanager

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.config import settings

# Клиент создаётся при старте приложения (main.py lifespan), здесь только ссылка
_client: MongoClient | None = None


def create_client() -> MongoClient:
    """Новый клиент с таймаутом выбора сервера из config."""
    return MongoClient(settings.MONGO_URI, serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS)


def get_client() -> MongoClient:
    """Вернуть клиент MongoDB. Вызывать после connect_to_mongo()."""
    if _client is None:
        raise RuntimeError("MongoDB not connected. Call connect_to_mongo() first.")
    return _client


def get_db(client: MongoClient | None = None) -> Database:
    """Вернуть экземпляр БД (по умолчанию — из общего клиента)."""
    return (client or get_client())[settings.MONGO_DB_NAME]


def get_menu_items_collection(client: MongoClient | None = None) -> Collection:
    """Коллекция позиций меню."""
    return get_db(client)[settings.MONGO_COLLECTION]


@contextmanager
def menu_items_session() -> Iterator[Collection]:
    """Коллекция на время одной операции.

    Если приложение подключено — берём общий пул (соединения возвращаются в пул драйвером).
    Иначе (скрипты, CLI) открываем отдельный клиент и закрываем его на любом выходе.
    """
    if _client is not None:
        yield get_menu_items_collection(_client)
        return
    client = create_client()
    try:
        yield get_menu_items_collection(client)
    finally:
        client.close()


def connect_to_mongo() -> None:
    """Подключиться к MongoDB. Вызывается в lifespan при старте."""
    global _client  # noqa: PLW0603
    _client = create_client()
    # Проверка доступности
    _client.admin.command("ping")


def close_mongo_connection() -> None:
    """Закрыть соединение. Вызывается в lifespan при остановке."""
    global _client
    if _client:
        _client.close()
        _client = None
