"""
Ошибки предметной области.

MenuItemError — входные данные не прошли валидацию (ответ 400).
StorageError — сбой хранилища (ответ 500).
"Не найдено" и "уже существует" — не ошибки: accessor возвращает False.
"""


class MenuItemError(ValueError):
    """Невалидные поля MenuItem. Сообщение: 'MenuItem constructor error: <причина>'."""

    prefix = "MenuItem constructor error: "

    def __init__(self, reason: str):
        self.reason = reason
        # "price must be defined" -> "price"
        self.field = reason.split(" ", 1)[0]
        super().__init__(self.prefix + reason)


class StorageError(RuntimeError):
    """Хранилище недоступно или вернуло ошибку. Исходное исключение — в __cause__."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        message = f"Could not complete {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
