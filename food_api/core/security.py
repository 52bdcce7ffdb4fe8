# food_api/core/security.py

from datetime import datetime, timedelta, timezone
from jose import jwt

from food_api.core.config import settings


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Подписывает JWT. В `data` ожидается `sub` - ID пользователя."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
