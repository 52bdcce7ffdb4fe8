# food_api/routers/admin/settings.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from food_api.dependencies import get_db
from food_api.schemas.settings import AppSettingsUpdate, SettingsUpdateResult
from food_api.services import settings as settings_service

# Префикс /settings добавляется на уровне выше в admin/__init__.py
router = APIRouter()


@router.patch("", response_model=SettingsUpdateResult)
def update_settings_endpoint(settings_data: AppSettingsUpdate, db: Session = Depends(get_db)):
    """
    [АДМИН] Обновляет глобальные настройки (в т.ч. стоимость доставки).
    Можно передавать только те поля, которые нужно изменить.
    """
    return settings_service.update_app_settings(db, settings_data)
