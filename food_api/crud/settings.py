# food_api/crud/settings.py
from typing import Optional
from sqlalchemy.orm import Session
from food_api.models.settings import AppSettings, SETTINGS_ROW_ID


def get_settings_row(db: Session) -> Optional[AppSettings]:
    return db.query(AppSettings).filter(AppSettings.id == SETTINGS_ROW_ID).first()

def update_settings_row(db: Session, **fields) -> AppSettings:
    """Частичное обновление; строка создается, если ее еще нет."""
    row = get_settings_row(db)
    if row is None:
        row = AppSettings(id=SETTINGS_ROW_ID)
        db.add(row)
    for key, value in fields.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row
