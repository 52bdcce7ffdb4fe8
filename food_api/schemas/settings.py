# food_api/schemas/settings.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class AppSettingsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    app_name: Optional[str] = None
    support_email: Optional[str] = None
    support_phone: Optional[str] = None
    cod_enabled: bool = True
    delivery_radius_km: Optional[float] = None
    tax_percent: float = 0.0
    delivery_fee: float = 0.0

class AppSettingsUpdate(BaseModel):
    """
    Схема для частичного обновления настроек.
    Все поля опциональны.
    """
    app_name: Optional[str] = None
    support_email: Optional[str] = None
    support_phone: Optional[str] = None
    cod_enabled: Optional[bool] = None
    delivery_radius_km: Optional[float] = Field(None, ge=0)
    tax_percent: Optional[float] = Field(None, ge=0, le=100)
    delivery_fee: Optional[float] = Field(None, ge=0)

class SettingsUpdateResult(BaseModel):
    message: str
    updated: List[str]
