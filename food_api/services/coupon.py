# food_api/services/coupon.py

import logging
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from food_api.crud import cart as crud_cart
from food_api.crud import coupon as crud_coupon
from food_api.crud import order as crud_order
from food_api.models.user import User
from food_api.schemas.coupon import CouponCartItem, CouponTerms, CouponValidationResult
from food_api.services.pricing import (
    ZERO, CouponEvaluation, CouponType, aggregate_cart, evaluate_coupon,
    line_total, normalize_code, resolve_coupon,
)

logger = logging.getLogger(__name__)


class CouponCheck(BaseModel):
    """Результат проверки промокода против конкретной корзины."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    evaluation: CouponEvaluation
    coupon: Any = None
    subtotal: Decimal = ZERO


def load_persisted_lines(db: Session, user_id: int) -> List[CouponCartItem]:
    """Сохраненная корзина в виде (категория, количество, цена)."""
    return [
        CouponCartItem(category=menu_item.category, quantity=cart_item.quantity, price=float(menu_item.price or 0))
        for cart_item, menu_item in crud_cart.get_cart_lines(db, user_id=user_id)
    ]


def check_coupon(
    db: Session,
    user: User,
    raw_code: str,
    today: date,
    lines: Optional[Sequence[Any]] = None,
) -> CouponCheck:
    """
    Единый путь проверки промокода для корзины и для /validate.
    `lines` - объекты с `category`, `quantity`, `price`; если не переданы,
    берется сохраненная корзина пользователя. Если хотя бы у одной строки
    нет цены, количество берется из `lines`, а subtotal - из сохраненной
    корзины, как в GET /cart.
    """
    if lines is None:
        lines = load_persisted_lines(db, user.id)

    priced_lines = lines
    if any(line.price is None for line in lines):
        priced_lines = load_persisted_lines(db, user.id)

    subtotal = sum((line_total(line.price, line.quantity) for line in priced_lines), ZERO)
    quantities = aggregate_cart(lines)

    code = normalize_code(raw_code)
    coupon = crud_coupon.get_coupon_by_code(db, code)
    resolution = resolve_coupon(coupon, today)
    if not resolution.is_active:
        logger.info(f"Coupon '{code}' rejected for user {user.id}: {resolution.status.value}")
        return CouponCheck(
            evaluation=CouponEvaluation(valid=False, message=resolution.message),
            coupon=coupon,
            subtotal=subtotal,
        )

    # История заказов нужна только для FIRST_ORDER
    prior_orders = 0
    if CouponType.parse(coupon.type) == CouponType.FIRST_ORDER:
        prior_orders = crud_order.count_user_orders(db, user_id=user.id)

    evaluation = evaluate_coupon(coupon, subtotal, quantities, prior_orders=prior_orders)
    if evaluation.valid:
        logger.info(f"Coupon '{code}' is valid for user {user.id}. Discount: {evaluation.discount}")
    else:
        logger.info(f"Coupon '{code}' is not applicable for user {user.id}: {evaluation.message}")
    return CouponCheck(evaluation=evaluation, coupon=coupon, subtotal=subtotal)


def validate_coupon(
    db: Session,
    user: User,
    code: str,
    today: date,
    cart_items: Optional[List[CouponCartItem]] = None,
) -> CouponValidationResult:
    check = check_coupon(db, user, code, today, lines=cart_items)
    if not check.evaluation.valid:
        return CouponValidationResult(valid=False, message=check.evaluation.message)

    terms = CouponTerms.from_coupon(check.coupon)
    return CouponValidationResult(
        valid=True,
        discount=float(check.evaluation.discount),
        **terms.model_dump(),
    )


def get_available_coupons(db: Session, today: date) -> List[CouponTerms]:
    """Все купоны, действующие на сегодня (новые сверху)."""
    return [CouponTerms.from_coupon(c) for c in crud_coupon.get_active_coupons(db, today)]
