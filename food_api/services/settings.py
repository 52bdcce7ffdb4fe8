# food_api/services/settings.py

import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from food_api.core import locales
from food_api.crud import settings as crud_settings
from food_api.schemas.settings import AppSettingsSchema, AppSettingsUpdate, SettingsUpdateResult

logger = logging.getLogger(__name__)


def get_app_settings(db: Session) -> AppSettingsSchema:
    """
    Читает строку глобальных настроек. Вызывается один раз на запрос,
    дальше значения (например, стоимость доставки) передаются параметрами.
    """
    row = crud_settings.get_settings_row(db)
    if row is None:
        logger.warning("Settings row is missing, falling back to defaults (delivery_fee=0).")
        return AppSettingsSchema()
    return AppSettingsSchema.model_validate(row)


def update_app_settings(db: Session, settings_data: AppSettingsUpdate) -> SettingsUpdateResult:
    """Обновляет только переданные поля."""
    fields = settings_data.model_dump(exclude_unset=True, exclude_none=True)
    if not fields:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_NO_SETTINGS_FIELDS)

    crud_settings.update_settings_row(db, **fields)
    logger.info(f"Settings updated: {sorted(fields)}")
    return SettingsUpdateResult(message=locales.SUCCESS_SETTINGS_UPDATED, updated=list(fields))
