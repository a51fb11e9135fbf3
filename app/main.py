"""
Точка входа FastAPI.

lifespan: подключение/отключение MongoDB при старте/остановке.
CORS, exception handlers (структурированные ответы), подключение роутеров (health, menuitems).
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.database import connect_to_mongo, close_mongo_connection
from app.core.errors import MenuItemError, StorageError
from app.routers import health, menu_items
from app.schemas.common import ErrorResponse, SuccessResponse

# Логирование
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл: при старте — подключение к Mongo, при остановке — отключение."""
    logger.info("Starting up: connecting to MongoDB...")
    connect_to_mongo()
    yield
    logger.info("Shutting down: closing MongoDB...")
    close_mongo_connection()


app = FastAPI(
    title="Restaurant Menu API",
    description="CRUD по меню ресторана. Структурированные ответы: success, data / error, message.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Обработчик неожиданных исключений — структурированный ответ
@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    body = ErrorResponse(error="internal_server_error", message="An unexpected error occurred")
    return JSONResponse(status_code=500, content=body.model_dump())


# Невалидная позиция меню в теле запроса — 400
@app.exception_handler(MenuItemError)
async def menu_item_exception_handler(request: Request, exc: MenuItemError):
    body = ErrorResponse(error="validation_error", message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


# Mongo недоступна или вернула ошибку — 500, подробности только в лог
@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s: %s", request.url.path, exc, exc_info=exc)
    body = ErrorResponse(error="storage_unavailable", message=f"Could not complete {exc.operation}")
    return JSONResponse(status_code=500, content=body.model_dump())


# Обработчик HTTPException (в т.ч. 404/405 самого роутинга) — структурированный ответ
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail and "message" in detail:
        body = ErrorResponse(error=detail["error"], message=detail["message"])
    elif exc.status_code == 404:
        body = ErrorResponse(error="not_found", message="Resource not found")
    else:
        body = ErrorResponse(error="request_failed", message=str(detail) if detail else "Request failed")
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# Обработчик валидации (422) — структурированный ответ
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = "; ".join(f"{e.get('loc', [])}: {e.get('msg', '')}" for e in errors[:3])
    body = ErrorResponse(error="validation_error", message=msg or "Validation failed")
    return JSONResponse(status_code=422, content=body.model_dump())


# Корень — структурированный ответ
@app.get("/", response_model=SuccessResponse[dict])
def root():
    return SuccessResponse(data={"message": "Restaurant Menu API", "docs": "/docs", "health": "/health"})


# Роутеры
app.include_router(health.router)
app.include_router(menu_items.router)
