# food_api/dependencies.py

import logging
from datetime import date, datetime
from typing import Iterator
from zoneinfo import ZoneInfo

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError, jwt

from food_api.core.config import settings
from food_api.db.session import SessionLocal
from food_api.models.user import User

# --- Инициализация логгера ---
logger = logging.getLogger(__name__)

# --- Схемы аутентификации ---
bearer_scheme = HTTPBearer(auto_error=False)

# --- Управление сессией БД ---
def get_db() -> Iterator[Session]:
    """
    Основная зависимость FastAPI для получения сессии БД.
    Это генератор, который корректно работает с `Depends`.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# --- Часы ---
def get_today() -> date:
    """
    Текущая дата в часовом поясе магазина. Читается один раз на запрос,
    чтобы все проверки окна действия купона видели одно и то же "сегодня".
    """
    return datetime.now(ZoneInfo(settings.TIMEZONE)).date()

# --- Зависимости аутентификации и авторизации ---

def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    ОБЯЗАТЕЛЬНАЯ зависимость.
    Требует валидный токен. Если его нет или он невалиден - вызывает ошибку 401.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        logger.debug("Request without bearer token.")
        raise credentials_exception

    try:
        payload = jwt.decode(credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id = payload.get("sub")
        if user_id is None:
            logger.warning("Token payload is missing 'sub' (user_id).")
            raise credentials_exception
        user_id = int(user_id)
    except (JWTError, ValueError) as e:
        logger.warning(f"JWT Error during token decoding: {e}")
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning(f"User with ID {user_id} from token not found in DB.")
        raise credentials_exception
    request.state.user = user
    return user


def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Зависимость для защиты админских эндпоинтов.
    """
    if not current_user.is_admin:
        logger.warning(f"Permission denied for user {current_user.id}: not an admin.")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to access this resource."
        )
    return current_user
