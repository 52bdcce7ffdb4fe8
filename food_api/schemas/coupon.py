# food_api/schemas/coupon.py

from datetime import date
from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from food_api.services.pricing import CouponType


class CouponCartItem(BaseModel):
    """
    Позиция корзины, переданная клиентом для проверки промокода.
    Количество принимается как `quantity` или `qty`.
    Цена необязательна: без нее суммы берутся из сохраненной корзины.
    """
    category: Optional[str] = None
    quantity: int = Field(..., ge=1, validation_alias=AliasChoices("quantity", "qty"))
    price: Optional[float] = Field(None, ge=0)


class CouponValidateRequest(BaseModel):
    """
    Тело запроса на проверку промокода.
    Если `cartItems` не передан, берется сохраненная корзина пользователя.
    """
    code: Optional[str] = None
    cart_items: Optional[List[CouponCartItem]] = Field(
        None, validation_alias=AliasChoices("cartItems", "cart_items")
    )


class CouponTerms(BaseModel):
    """Публичные условия промокода."""
    id: int
    code: str
    description: str = ""
    type: str
    value: float
    min_qty: Optional[int] = None
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    image_url: Optional[str] = None

    @classmethod
    def from_coupon(cls, coupon) -> "CouponTerms":
        return cls(
            id=coupon.id,
            code=coupon.code.strip(),
            description=coupon.description or "",
            type=coupon.type,
            value=float(coupon.discount or 0),
            min_qty=coupon.min_qty,
            category=coupon.category,
            start_date=coupon.start_date,
            end_date=coupon.end_date,
            image_url=coupon.image_url,
        )


class CouponValidationResult(BaseModel):
    """
    Ответ проверки. Для неприменимого купона заполнены только
    `valid` и `message` (остальное не попадает в JSON).
    """
    valid: bool
    message: Optional[str] = None
    discount: Optional[float] = None
    id: Optional[int] = None
    code: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    value: Optional[float] = None
    min_qty: Optional[int] = None
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    image_url: Optional[str] = None


class CouponCreate(BaseModel):
    """Схема для создания или полной замены промокода (админка)."""
    code: str = Field(..., min_length=1, description="Код купона, например, 'SALE10'")
    description: Optional[str] = None
    type: CouponType = Field(..., description="PERCENT | BUY_X | FIRST_ORDER | DATE_RANGE")
    discount: float = Field(..., ge=0, description="Проценты для PERCENT, сумма для остальных типов")
    min_qty: Optional[int] = Field(None, ge=1)
    category: Optional[str] = None
    start_date: Optional[date] = Field(None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[date] = Field(None, validation_alias=AliasChoices("end_date", "endDate"))
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("image_url", "image"))

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("code must not be blank")
        return v

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        # Старые клиенты присылают 'percent'
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("category", "description", "image_url")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def check_terms(self):
        if self.type == CouponType.BUY_X and not self.min_qty:
            raise ValueError("min_qty is required for BUY_X coupons")
        if self.type == CouponType.PERCENT and self.discount > 100:
            raise ValueError("percent discount cannot exceed 100")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class MessageResponse(BaseModel):
    message: str
