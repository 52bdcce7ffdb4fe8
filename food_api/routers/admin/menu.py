# food_api/routers/admin/menu.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.dependencies import get_db
from food_api.schemas.catalog import MenuItemAdminSchema, MenuItemCreate
from food_api.schemas.coupon import MessageResponse
from food_api.services import catalog_admin as catalog_admin_service

router = APIRouter()


@router.get("", response_model=List[MenuItemAdminSchema])
def get_menu_list(db: Session = Depends(get_db)):
    """
    [АДМИН] Все блюда, включая недоступные для заказа.
    """
    return catalog_admin_service.get_all_menu_items(db)


@router.post("", response_model=MenuItemAdminSchema, status_code=status.HTTP_201_CREATED)
def create_new_menu_item(item_data: MenuItemCreate, db: Session = Depends(get_db)):
    """
    [АДМИН] Добавляет блюдо в меню.
    """
    return catalog_admin_service.create_menu_item(db, item_data)


@router.put("/{menu_item_id}", response_model=MenuItemAdminSchema)
def update_existing_menu_item(menu_item_id: int, item_data: MenuItemCreate, db: Session = Depends(get_db)):
    return catalog_admin_service.update_menu_item(db, menu_item_id, item_data)


@router.delete("/{menu_item_id}", response_model=MessageResponse)
def delete_existing_menu_item(menu_item_id: int, db: Session = Depends(get_db)):
    """
    [АДМИН] Удаляет блюдо.
    """
    catalog_admin_service.delete_menu_item(db, menu_item_id)
    return MessageResponse(message=locales.SUCCESS_MENU_ITEM_DELETED)
