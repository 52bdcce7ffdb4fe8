# food_api/services/pricing.py

"""
Движок расчета корзины и применимости промокодов.

Здесь только чистые функции: данные из БД (корзина, купон, количество
заказов, стоимость доставки) передаются параметрами, текущая дата тоже.
Этот модуль используют и корзина (GET /cart), и проверка промокода
(POST /available-coupons/validate), поэтому правила живут в одном месте.
"""

import enum
import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict

from food_api.core import locales

logger = logging.getLogger(__name__)

MISC_CATEGORY = "misc"
CENT = Decimal("0.01")
ZERO = Decimal("0")


class CouponType(str, enum.Enum):
    """Канонический словарь типов промокодов."""
    PERCENT = "PERCENT"
    BUY_X = "BUY_X"
    FIRST_ORDER = "FIRST_ORDER"
    DATE_RANGE = "DATE_RANGE"

    @classmethod
    def parse(cls, raw: Any) -> Optional["CouponType"]:
        """'percent', ' Percent ' -> PERCENT. Неизвестное значение -> None."""
        if raw is None:
            return None
        try:
            return cls(str(raw).strip().upper())
        except ValueError:
            return None


class CouponStatus(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    EXPIRED = "EXPIRED"
    NOT_STARTED = "NOT_STARTED"
    ACTIVE = "ACTIVE"


_STATUS_MESSAGES = {
    CouponStatus.NOT_FOUND: locales.COUPON_NOT_FOUND,
    CouponStatus.EXPIRED: locales.COUPON_EXPIRED,
    CouponStatus.NOT_STARTED: locales.COUPON_NOT_STARTED,
}


# --- Результаты расчетов ---

class CartQuantities(BaseModel):
    total_qty: int = 0
    category_qty: Dict[str, int] = {}


class CouponResolution(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: CouponStatus
    coupon: Any = None

    @property
    def is_active(self) -> bool:
        return self.status == CouponStatus.ACTIVE

    @property
    def message(self) -> Optional[str]:
        return _STATUS_MESSAGES.get(self.status)


class CouponEvaluation(BaseModel):
    valid: bool
    discount: Decimal = ZERO
    message: Optional[str] = None


# --- Деньги ---

def to_decimal(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() убирает артефакты float: 0.1 -> Decimal('0.1')
    return Decimal(str(value))


def round2(value: Any) -> Decimal:
    """Округление до копеек, половина - от нуля (2.345 -> 2.35, -2.345 -> -2.35)."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(price: Any, quantity: int) -> Decimal:
    return round2(to_decimal(price) * quantity)


# --- Агрегация корзины ---

def normalize_category(category: Optional[str]) -> str:
    label = (category or "").strip().lower()
    return label or MISC_CATEGORY


def aggregate_cart(lines: Iterable[Any]) -> CartQuantities:
    """
    Считает общее количество единиц и количество по категориям.
    Каждая строка - любой объект с атрибутами `category` и `quantity`.
    """
    total_qty = 0
    category_qty: Dict[str, int] = {}
    for line in lines:
        qty = int(line.quantity)
        key = normalize_category(line.category)
        category_qty[key] = category_qty.get(key, 0) + qty
        total_qty += qty
    return CartQuantities(total_qty=total_qty, category_qty=category_qty)


# --- Поиск и окно действия ---

def normalize_code(raw_code: Optional[str]) -> str:
    return (raw_code or "").strip().upper()


def resolve_coupon(coupon: Any, today: date) -> CouponResolution:
    """
    Проверяет окно действия найденного купона.
    Границы включительные, пустая граница = без ограничения.
    """
    if coupon is None:
        return CouponResolution(status=CouponStatus.NOT_FOUND)
    if coupon.start_date is not None and today < coupon.start_date:
        return CouponResolution(status=CouponStatus.NOT_STARTED, coupon=coupon)
    if coupon.end_date is not None and today > coupon.end_date:
        return CouponResolution(status=CouponStatus.EXPIRED, coupon=coupon)
    return CouponResolution(status=CouponStatus.ACTIVE, coupon=coupon)


# --- Применимость и размер скидки ---

def _ineligible(message: str) -> CouponEvaluation:
    return CouponEvaluation(valid=False, message=message)


def evaluate_coupon(
    coupon: Any,
    subtotal: Any,
    quantities: CartQuantities,
    prior_orders: int = 0,
) -> CouponEvaluation:
    """
    Решает, применим ли АКТИВНЫЙ купон к корзине, и считает скидку.
    Неприменимость - это обычный результат `valid=False`, исключений нет.
    Скидка не превышает subtotal.
    """
    subtotal = round2(subtotal)
    value = to_decimal(coupon.discount)
    coupon_type = CouponType.parse(coupon.type)

    if coupon_type is None:
        logger.warning(f"Coupon '{coupon.code}' has unknown type '{coupon.type}'.")
        return _ineligible(locales.COUPON_UNKNOWN_TYPE)

    if coupon_type == CouponType.PERCENT:
        discount = round2(subtotal * value / 100)

    elif coupon_type == CouponType.BUY_X:
        # min_qty обязателен для BUY_X; если его нет, достаточно одной единицы
        min_qty = coupon.min_qty or 1
        category = (coupon.category or "").strip()
        if category:
            # Категория задана - считаем только ее, даже если ее нет в корзине
            have = quantities.category_qty.get(normalize_category(category), 0)
            if have < min_qty:
                return _ineligible(locales.COUPON_MIN_QTY_CATEGORY.format(min_qty=min_qty, category=category))
        elif quantities.total_qty < min_qty:
            return _ineligible(locales.COUPON_MIN_QTY.format(min_qty=min_qty))
        discount = round2(value)

    elif coupon_type == CouponType.FIRST_ORDER:
        if prior_orders > 0:
            return _ineligible(locales.COUPON_FIRST_ORDER_ONLY)
        discount = round2(value)

    else:  # DATE_RANGE: окно уже проверено в resolve_coupon
        discount = round2(value)

    discount = max(min(discount, subtotal), ZERO)
    return CouponEvaluation(valid=True, discount=discount)


# --- Итог ---

def assemble_total(subtotal: Any, discount: Any, delivery_fee: Any, item_count: int) -> Decimal:
    """total = round2(subtotal - discount) + доставка (только для непустой корзины)."""
    net = round2(to_decimal(subtotal) - to_decimal(discount))
    fee = to_decimal(delivery_fee) if item_count > 0 else ZERO
    return max(round2(net + fee), ZERO)
