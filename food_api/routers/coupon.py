# food_api/routers/coupon.py

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.core.config import settings
from food_api.core.limiter import limiter
from food_api.dependencies import get_current_user, get_db, get_today
from food_api.models.user import User
from food_api.schemas.coupon import CouponTerms, CouponValidateRequest, CouponValidationResult
from food_api.services import coupon as coupon_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/available-coupons")


@router.get("", response_model=List[CouponTerms])
def list_available_coupons(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Промокоды, действующие сегодня."""
    return coupon_service.get_available_coupons(db, today)


@router.post(
    "/validate",
    response_model=CouponValidationResult,
    response_model_exclude_unset=True,
)
@limiter.limit(settings.COUPON_VALIDATE_RATE_LIMIT)
def validate_coupon_endpoint(
    request: Request,
    request_data: CouponValidateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Проверяет промокод для переданного состава корзины
    (или для сохраненной корзины, если `cartItems` не передан).
    Неприменимый купон - это ответ 200 с `valid: false`.
    """
    if not (request_data.code or "").strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"valid": False, "message": locales.ERROR_CODE_REQUIRED},
        )

    logger.info(f"Received request to validate coupon '{request_data.code}' for user {current_user.id}")
    return coupon_service.validate_coupon(
        db, current_user, request_data.code, today, cart_items=request_data.cart_items
    )
