# food_api/core/limiter.py

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from food_api.core.config import settings

logger = logging.getLogger(__name__)

# --- Функция-ключ для идентификации запросов ---

def key_func(request: Request) -> str:
    """
    Приоритет: ID пользователя (если авторизован) -> IP-адрес.
    Пользователя кладет в request.state зависимость get_current_user.
    """
    user = getattr(request.state, "user", None)
    if user is not None and user.id:
        return f"user:{user.id}"
    return get_remote_address(request)

# Счетчики - в памяти процесса по умолчанию, для нескольких воркеров задается redis:// URI
limiter = Limiter(
    key_func=key_func,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="moving-window",
)
