# food_api/core/config.py

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Настройки базы данных
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_NAME: str = "food"
    # Полный URL (например, sqlite:///./dev.db) имеет приоритет над отдельными полями
    DATABASE_URL_OVERRIDE: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # Настройки JWT токенов
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 7 дней

    # Хост, на котором лежат загруженные картинки меню (для путей вида /uploads/...)
    MEDIA_BASE_URL: str = "http://localhost:3000"

    CORS_ORIGINS_STR: str = Field(default="http://localhost:3000,http://localhost:5173", alias="CORS_ORIGINS")

    # Лимит на проверку промокодов (перебор кодов)
    COUPON_VALIDATE_RATE_LIMIT: str = "30/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    TIMEZONE: str = "UTC"

    # Логирование: уровень для логгеров приложения, SQL_ECHO включает лог запросов SQLAlchemy
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+psycopg2://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

settings = Settings()
