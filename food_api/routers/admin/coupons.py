# food_api/routers/admin/coupons.py

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.dependencies import get_db
from food_api.schemas.coupon import CouponCreate, CouponTerms, MessageResponse
from food_api.services import coupon_admin as coupon_admin_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CouponTerms])
def get_coupons_list(db: Session = Depends(get_db)):
    """
    [АДМИН] Получает список всех промокодов.
    """
    return coupon_admin_service.get_all_coupons(db)


@router.post("", response_model=CouponTerms, status_code=status.HTTP_201_CREATED)
def create_new_coupon(coupon_data: CouponCreate, db: Session = Depends(get_db)):
    """
    [АДМИН] Создает новый промокод.
    """
    return coupon_admin_service.create_coupon(db, coupon_data)


@router.put("/{coupon_id}", response_model=CouponTerms)
def update_existing_coupon(coupon_id: int, coupon_data: CouponCreate, db: Session = Depends(get_db)):
    """
    [АДМИН] Полностью заменяет условия промокода.
    """
    return coupon_admin_service.update_coupon(db, coupon_id, coupon_data)


@router.delete("/{coupon_id}", response_model=MessageResponse)
def delete_existing_coupon(coupon_id: int, db: Session = Depends(get_db)):
    """
    [АДМИН] Безвозвратно удаляет промокод.
    """
    coupon_admin_service.delete_coupon(db, coupon_id)
    return MessageResponse(message=locales.SUCCESS_COUPON_DELETED)
