# food_api/routers/cart.py

import logging
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from food_api.dependencies import get_current_user, get_db, get_today
from food_api.models.user import User
from food_api.schemas.cart import CartItemUpdate, CartQuantityUpdate, CartResponse, CartUpdateResponse
from food_api.services import cart as cart_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cart")


@router.get("", response_model=CartResponse)
def get_cart(
    coupon: str | None = Query(None, description="Промокод для расчета скидки"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Содержимое корзины с расчетом subtotal, скидки, доставки и итога.
    """
    return cart_service.get_user_cart(db, current_user, today, coupon)


@router.post("", response_model=CartUpdateResponse)
def add_cart_item(
    item_data: CartItemUpdate,
    coupon: str | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Добавление блюда в корзину или перезапись его количества."""
    return cart_service.set_item_quantity(
        db, current_user, item_data.menu_item_id, item_data.quantity, today, coupon
    )


@router.api_route("/{item_id}", methods=["PATCH", "PUT"], response_model=CartUpdateResponse)
def update_cart_item(
    item_id: int,
    item_data: CartQuantityUpdate,
    coupon: str | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Изменение количества; 0 и меньше удаляет позицию."""
    return cart_service.set_item_quantity(db, current_user, item_id, item_data.quantity, today, coupon)


@router.delete("/{item_id}", response_model=CartUpdateResponse)
def delete_cart_item(
    item_id: int,
    coupon: str | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Удаление позиции из корзины."""
    return cart_service.remove_item(db, current_user, item_id, today, coupon)


@router.delete("", response_model=CartUpdateResponse)
def clear_cart(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Полная очистка корзины."""
    return cart_service.clear(db, current_user, today)
