# food_api/services/catalog_admin.py

import logging
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.crud import catalog as crud_catalog
from food_api.models.catalog import MenuItem
from food_api.schemas.catalog import MenuItemAdminSchema, MenuItemCreate

logger = logging.getLogger(__name__)


def _get_or_404(db: Session, menu_item_id: int) -> MenuItem:
    menu_item = crud_catalog.get_menu_item(db, menu_item_id)
    if menu_item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_MENU_ITEM_NOT_FOUND)
    return menu_item


def get_all_menu_items(db: Session) -> List[MenuItemAdminSchema]:
    """
    Получает все блюда, включая снятые с продажи.
    """
    return [MenuItemAdminSchema.model_validate(m) for m in crud_catalog.get_all_menu_items(db)]


def create_menu_item(db: Session, item_data: MenuItemCreate) -> MenuItemAdminSchema:
    menu_item = crud_catalog.create_menu_item(db, **item_data.model_dump())
    logger.info(f"Menu item {menu_item.id} '{menu_item.name}' created (price={menu_item.price}, category={menu_item.category}).")
    return MenuItemAdminSchema.model_validate(menu_item)


def update_menu_item(db: Session, menu_item_id: int, item_data: MenuItemCreate) -> MenuItemAdminSchema:
    """
    Полностью заменяет карточку блюда. Новая цена сразу видна во всех корзинах.
    """
    menu_item = _get_or_404(db, menu_item_id)
    menu_item = crud_catalog.update_menu_item(db, menu_item, **item_data.model_dump())
    logger.info(f"Menu item {menu_item.id} updated.")
    return MenuItemAdminSchema.model_validate(menu_item)


def delete_menu_item(db: Session, menu_item_id: int):
    """
    Удаляет блюдо вместе со строками корзин, которые на него ссылаются.
    """
    menu_item = _get_or_404(db, menu_item_id)
    crud_catalog.delete_menu_item(db, menu_item)
    logger.info(f"Menu item {menu_item_id} deleted.")
