# food_api/services/coupon_admin.py

import logging
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.crud import coupon as crud_coupon
from food_api.models.coupon import Coupon
from food_api.schemas.coupon import CouponCreate, CouponTerms

logger = logging.getLogger(__name__)


def _coupon_fields(coupon_data: CouponCreate) -> dict:
    fields = coupon_data.model_dump()
    # В БД пишем строковое значение канонического типа
    fields["type"] = coupon_data.type.value
    return fields


def _get_or_404(db: Session, coupon_id: int) -> Coupon:
    coupon = crud_coupon.get_coupon(db, coupon_id)
    if coupon is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_COUPON_NOT_FOUND)
    return coupon


def _ensure_code_free(db: Session, code: str, coupon_id: int | None = None):
    existing = crud_coupon.get_coupon_by_code(db, code)
    if existing is not None and existing.id != coupon_id:
        logger.warning(f"Coupon code '{code}' is already used by coupon {existing.id}.")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=locales.ERROR_COUPON_CODE_TAKEN)


def get_all_coupons(db: Session) -> List[CouponTerms]:
    """
    Получает список всех промокодов (включая неактивные).
    """
    return [CouponTerms.from_coupon(c) for c in crud_coupon.get_all_coupons(db)]


def create_coupon(db: Session, coupon_data: CouponCreate) -> CouponTerms:
    """
    Создает новый промокод. Код хранится в верхнем регистре.
    """
    _ensure_code_free(db, coupon_data.code)
    try:
        coupon = crud_coupon.create_coupon(db, **_coupon_fields(coupon_data))
    except IntegrityError:
        # Гонка двух одинаковых кодов: уникальный индекс сработал раньше нас
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=locales.ERROR_COUPON_CODE_TAKEN)
    logger.info(f"Coupon {coupon.id} '{coupon.code}' ({coupon.type}) created.")
    return CouponTerms.from_coupon(coupon)


def update_coupon(db: Session, coupon_id: int, coupon_data: CouponCreate) -> CouponTerms:
    """
    Полностью заменяет условия промокода.
    """
    coupon = _get_or_404(db, coupon_id)
    _ensure_code_free(db, coupon_data.code, coupon_id=coupon_id)
    coupon = crud_coupon.update_coupon(db, coupon, **_coupon_fields(coupon_data))
    logger.info(f"Coupon {coupon.id} '{coupon.code}' updated.")
    return CouponTerms.from_coupon(coupon)


def delete_coupon(db: Session, coupon_id: int):
    """
    Удаляет промокод.
    """
    coupon = _get_or_404(db, coupon_id)
    crud_coupon.delete_coupon(db, coupon)
    logger.info(f"Coupon {coupon_id} deleted.")
