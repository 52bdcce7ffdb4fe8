# food_api/core/locales.py

# Сообщения об ошибках запроса
ERROR_MENU_ITEM_NOT_FOUND = "Menu item not found"
ERROR_ITEM_NOT_IN_CART = "Item not found in cart"
ERROR_COUPON_NOT_FOUND = "Coupon not found"
ERROR_COUPON_CODE_TAKEN = "Coupon code already exists"
ERROR_NO_SETTINGS_FIELDS = "No valid fields supplied"
ERROR_CODE_REQUIRED = "Code is required"
ERROR_INTERNAL = "Internal server error"

# Причины неприменимости промокода (бизнес-результат, не ошибка)
COUPON_NOT_FOUND = "Coupon not found"
COUPON_EXPIRED = "Coupon expired"
COUPON_NOT_STARTED = "Coupon not started yet"
COUPON_FIRST_ORDER_ONLY = "Coupon valid only on your first order"
COUPON_UNKNOWN_TYPE = "Unknown coupon type"
COUPON_MIN_QTY_CATEGORY = "Add at least {min_qty} items from '{category}' to use this coupon"
COUPON_MIN_QTY = "Add at least {min_qty} items to use this coupon"
COUPON_APPLIED = "Coupon '{code}' applied! You save {discount:.2f}"

# Сообщения об успехе
SUCCESS_COUPON_DELETED = "Coupon deleted"
SUCCESS_MENU_ITEM_DELETED = "Menu item deleted"
SUCCESS_SETTINGS_UPDATED = "updated"
