# food_api/main.py

import logging
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

# Конфигурация и ядро
from food_api.core import locales
from food_api.core.config import settings as config
from food_api.core.limiter import limiter
from food_api.core.logging_config import setup_logging

# Роутеры FastAPI
from food_api.routers import (
    cart, catalog, coupon as coupon_router, settings as settings_router
)
from food_api.routers import admin as admin_router

# --- Инициализация ---
logger = logging.getLogger(__name__)

# --- Обработчики ошибок ---
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Сбой БД завершает запрос: без повторов, клиент просто запросит снова.
    """
    logger.error(f"Database error for request: {request.method} {request.url}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": locales.ERROR_INTERNAL})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Глобальный обработчик для всех необработанных исключений.
    """
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": locales.ERROR_INTERNAL})

# --- Lifespan Manager (запуск и остановка приложения) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Application lifespan startup...")
    yield
    logger.info("Application shutting down.")

# --- Создание FastAPI приложения ---
app = FastAPI(
    title="Food Ordering Service",
    description="Cart pricing, coupons and admin settings for the food ordering app",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Лимитер запросов ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- Регистрация обработчиков исключений ---
app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Подключение роутеров FastAPI ---
api_router = APIRouter(prefix="/api")

# Пользовательские и публичные эндпоинты
api_router.include_router(catalog.router, tags=["Menu"])
api_router.include_router(cart.router, tags=["Cart"])
api_router.include_router(coupon_router.router, tags=["Coupons"])
api_router.include_router(settings_router.router, tags=["Settings"])

# Админские эндпоинты
api_router.include_router(admin_router.router, prefix="/admin")

# Подключаем главный роутер к приложению
app.include_router(api_router)
