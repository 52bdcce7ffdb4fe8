# food_api/routers/settings.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from food_api.dependencies import get_db
from food_api.schemas.settings import AppSettingsSchema
from food_api.services import settings as settings_service

router = APIRouter()


@router.get("/settings", response_model=AppSettingsSchema)
def get_settings(db: Session = Depends(get_db)):
    """Публичные настройки приложения (стоимость доставки, контакты)."""
    return settings_service.get_app_settings(db)
