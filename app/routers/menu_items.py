"""
REST для позиций меню: /api/menuitems.

Роутер собирает MenuItem из тела запроса, вызывает accessor и переводит ответ в HTTP-статус:
False от add -> 409, False от update/delete -> 404.
MenuItemError (400) и StorageError (500) обрабатываются в main.
Массовые операции и GET одной позиции не поддерживаются (405).
"""
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from app.models.menu_item import MAX_ID, MIN_ID, MenuItem
from app.repositories.menu_item_accessor import MenuItemAccessor, get_menu_item_accessor
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.menu_item import MenuItemOut

router = APIRouter(prefix="/api/menuitems", tags=["menuitems"])


def _not_allowed(message: str) -> HTTPException:
    return HTTPException(405, detail={"error": "method_not_allowed", "message": message})


def _check_path_id(item_id: int) -> None:
    """id вне [100, 999] в URL — такого ресурса быть не может."""
    if item_id < MIN_ID or item_id > MAX_ID:
        raise HTTPException(404, detail={"error": "not_found", "message": "Resource not found"})


def _item_from_body(item_id: int, payload: Any) -> MenuItem:
    """Тело -> MenuItem. id в теле должен совпадать с id в URL.

    Не-объект (список, число, пустое тело) разбирается как {} и даёт "id must be defined".
    """
    item = MenuItem.from_dict(payload if isinstance(payload, Mapping) else {})
    if item.id != item_id:
        raise HTTPException(
            400,
            detail={
                "error": "id_mismatch",
                "message": f"id in body ({item.id}) does not match id in path ({item_id})",
            },
        )
    return item


def _does_not_exist(item_id: int) -> HTTPException:
    return HTTPException(404, detail={"error": "not_found", "message": f"item {item_id} does not exist"})


@router.get("", response_model=SuccessResponse[list[MenuItemOut]])
def list_menu_items(accessor: MenuItemAccessor = Depends(get_menu_item_accessor)):
    """Все позиции меню по возрастанию id."""
    data = [MenuItemOut.from_entity(item) for item in accessor.get_all_items()]
    return SuccessResponse(data=data)


@router.post("", responses={405: {"model": ErrorResponse}})
def bulk_insert():
    raise _not_allowed("Bulk inserts not supported")


@router.put("", responses={405: {"model": ErrorResponse}})
def bulk_update():
    raise _not_allowed("Bulk updates not supported")


@router.delete("", responses={405: {"model": ErrorResponse}})
def bulk_delete():
    raise _not_allowed("Bulk deletes not supported")


@router.get("/{item_id:int}", responses={404: {"model": ErrorResponse}, 405: {"model": ErrorResponse}})
def get_menu_item(item_id: int):
    _check_path_id(item_id)
    raise _not_allowed("Single GETs not supported")


@router.post(
    "/{item_id:int}",
    response_model=SuccessResponse[MenuItemOut],
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def add_menu_item(
    item_id: int,
    payload: Any = Body(None),
    accessor: MenuItemAccessor = Depends(get_menu_item_accessor),
):
    """Добавить позицию. 409, если id уже занят."""
    _check_path_id(item_id)
    item = _item_from_body(item_id, payload)
    if not accessor.add_item(item):
        raise HTTPException(409, detail={"error": "conflict", "message": f"item {item_id} already exists"})
    return SuccessResponse(data=MenuItemOut.from_entity(item))


@router.put(
    "/{item_id:int}",
    response_model=SuccessResponse[MenuItemOut],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_menu_item(
    item_id: int,
    payload: Any = Body(None),
    accessor: MenuItemAccessor = Depends(get_menu_item_accessor),
):
    """Обновить все поля, кроме id. 404, если позиции нет."""
    _check_path_id(item_id)
    item = _item_from_body(item_id, payload)
    if not accessor.update_item(item):
        raise _does_not_exist(item_id)
    return SuccessResponse(data=MenuItemOut.from_entity(item))


@router.delete(
    "/{item_id:int}",
    response_model=SuccessResponse[None],
    responses={404: {"model": ErrorResponse}},
)
def delete_menu_item(item_id: int, accessor: MenuItemAccessor = Depends(get_menu_item_accessor)):
    """Удалить позицию по id. 404, если позиции нет."""
    _check_path_id(item_id)
    if not accessor.delete_item_by_id(item_id):
        raise _does_not_exist(item_id)
    return SuccessResponse(data=None)
