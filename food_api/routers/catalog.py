# food_api/routers/catalog.py

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from food_api.crud import catalog as crud_catalog
from food_api.dependencies import get_db
from food_api.schemas.catalog import MenuItemSchema

router = APIRouter()


@router.get("/menu", response_model=List[MenuItemSchema])
def get_menu(db: Session = Depends(get_db)):
    """Доступные для заказа блюда."""
    return crud_catalog.get_available_menu_items(db)
