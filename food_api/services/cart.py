# food_api/services/cart.py

import logging
from datetime import date
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.core.config import settings
from food_api.crud import cart as crud_cart
from food_api.crud import catalog as crud_catalog
from food_api.models.catalog import MenuItem
from food_api.models.user import User
from food_api.schemas.cart import (
    AppliedCoupon, CartLine, CartResponse, CartStatusNotification, CartUpdateResponse
)
from food_api.services import coupon as coupon_service
from food_api.services import settings as settings_service
from food_api.services.pricing import ZERO, assemble_total, line_total, normalize_code, to_decimal

logger = logging.getLogger(__name__)


def _media_url(image_url: Optional[str]) -> Optional[str]:
    # Загруженные картинки хранятся как относительные пути (/uploads/...)
    if image_url and image_url.startswith('/'):
        return f"{settings.MEDIA_BASE_URL.rstrip('/')}{image_url}"
    return image_url or None


def load_cart_lines(db: Session, user_id: int) -> List[CartLine]:
    lines = []
    for cart_item, menu_item in crud_cart.get_cart_lines(db, user_id=user_id):
        price = to_decimal(menu_item.price)
        lines.append(CartLine(
            menu_item_id=menu_item.id,
            name=menu_item.name,
            quantity=cart_item.quantity,
            price=float(price),
            total_price=float(line_total(price, cart_item.quantity)),
            image_url=_media_url(menu_item.image_url),
            category=menu_item.category,
        ))
    return lines


def get_user_cart(
    db: Session,
    current_user: User,
    today: date,
    coupon_code: str | None = None
) -> CartResponse:
    """
    Собирает корзину пользователя с расчетом:
    - стоимости позиций и subtotal;
    - скидки по промокоду (если передан и корзина не пуста);
    - итоговой суммы с доставкой.
    Ничего не кешируется: каждый запрос читает актуальные данные.
    """
    app_settings = settings_service.get_app_settings(db)
    items = load_cart_lines(db, current_user.id)
    subtotal = sum((line_total(item.price, item.quantity) for item in items), ZERO)

    discount = ZERO
    applied_coupon = None
    notifications = []

    if normalize_code(coupon_code) and items:
        check = coupon_service.check_coupon(db, current_user, coupon_code, today, lines=items)
        if check.evaluation.valid:
            discount = check.evaluation.discount
            applied_coupon = AppliedCoupon(
                id=check.coupon.id,
                code=check.coupon.code,
                type=check.coupon.type,
                value=float(check.coupon.discount or 0),
                discount=float(discount),
            )
            notifications.append(CartStatusNotification(
                level="success",
                message=locales.COUPON_APPLIED.format(code=check.coupon.code, discount=discount),
            ))
        else:
            notifications.append(CartStatusNotification(level="error", message=check.evaluation.message))

    delivery_fee = to_decimal(app_settings.delivery_fee)
    total = assemble_total(subtotal, discount, delivery_fee, len(items))

    return CartResponse(
        items=items,
        subtotal=float(subtotal),
        delivery_fee=float(delivery_fee),
        discount=float(discount),
        coupon=applied_coupon,
        total=float(total),
        notifications=notifications,
    )


def _get_orderable_item(db: Session, menu_item_id: int) -> MenuItem:
    menu_item = crud_catalog.get_menu_item(db, menu_item_id)
    if not menu_item or not menu_item.available:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_MENU_ITEM_NOT_FOUND)
    return menu_item


def set_item_quantity(
    db: Session,
    current_user: User,
    menu_item_id: int,
    quantity: int,
    today: date,
    coupon_code: str | None = None
) -> CartUpdateResponse:
    """
    Записывает количество позиции. Количество 0 и меньше удаляет позицию.
    В ответе сразу свежий расчет корзины.
    """
    if quantity <= 0:
        crud_cart.remove_cart_item(db, user_id=current_user.id, menu_item_id=menu_item_id)
        logger.info(f"User {current_user.id} removed menu item {menu_item_id} from cart (quantity={quantity}).")
        return CartUpdateResponse(removed=True, cart=get_user_cart(db, current_user, today, coupon_code))

    _get_orderable_item(db, menu_item_id)
    crud_cart.add_or_update_cart_item(db, user_id=current_user.id, menu_item_id=menu_item_id, quantity=quantity)
    logger.info(f"User {current_user.id} set menu item {menu_item_id} quantity to {quantity}.")
    return CartUpdateResponse(cart=get_user_cart(db, current_user, today, coupon_code))


def remove_item(
    db: Session,
    current_user: User,
    menu_item_id: int,
    today: date,
    coupon_code: str | None = None
) -> CartUpdateResponse:
    success = crud_cart.remove_cart_item(db, user_id=current_user.id, menu_item_id=menu_item_id)
    if not success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_ITEM_NOT_IN_CART)
    return CartUpdateResponse(removed=True, cart=get_user_cart(db, current_user, today, coupon_code))


def clear(db: Session, current_user: User, today: date) -> CartUpdateResponse:
    crud_cart.clear_cart(db, user_id=current_user.id)
    logger.info(f"Cart cleared for user {current_user.id}.")
    return CartUpdateResponse(cart=get_user_cart(db, current_user, today))
