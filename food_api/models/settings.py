# food_api/models/settings.py

from sqlalchemy import Column, Integer, String, Boolean, Numeric
from food_api.db.session import Base

SETTINGS_ROW_ID = 1


class AppSettings(Base):
    """Глобальные настройки приложения. В таблице всегда одна строка с id=1."""
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    app_name = Column(String, nullable=True)
    support_email = Column(String, nullable=True)
    support_phone = Column(String, nullable=True)
    cod_enabled = Column(Boolean, default=True, nullable=False, server_default='true')
    delivery_radius_km = Column(Numeric(6, 2), nullable=True)
    tax_percent = Column(Numeric(5, 2), nullable=False, default=0, server_default='0')
    delivery_fee = Column(Numeric(10, 2), nullable=False, default=0, server_default='0')
