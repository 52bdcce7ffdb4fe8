# food_api/schemas/cart.py
from pydantic import BaseModel, Field
from typing import List, Optional

# Схема для добавления/обновления блюда в корзине
class CartItemUpdate(BaseModel):
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(1, ge=1) # Количество должно быть не меньше 1

# Изменение количества существующей позиции; 0 и меньше - удаление
class CartQuantityUpdate(BaseModel):
    quantity: int

# Одна позиция корзины с ценой из меню
class CartLine(BaseModel):
    menu_item_id: int
    name: str
    quantity: int
    price: float
    total_price: float
    image_url: str | None = None
    category: str | None = None

class CartStatusNotification(BaseModel):
    level: str  # "success" | "error"
    message: str

# Условия примененного промокода
class AppliedCoupon(BaseModel):
    id: int
    code: str
    type: str
    value: float     # Номинал: проценты или сумма
    discount: float  # Фактическая скидка по этой корзине

class CartResponse(BaseModel):
    items: List[CartLine]

    # --- Основные расчеты ---
    subtotal: float
    delivery_fee: float
    discount: float = 0.0
    coupon: Optional[AppliedCoupon] = None
    total: float  # round2(subtotal - discount) + delivery_fee (для непустой корзины)

    # --- Информация для пользователя ---
    notifications: List[CartStatusNotification] = []

# Ответ на изменение корзины: свежий расчет сразу в ответе
class CartUpdateResponse(BaseModel):
    ok: bool = True
    removed: bool = False
    cart: CartResponse
