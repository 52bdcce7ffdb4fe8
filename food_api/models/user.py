# food_api/models/user.py

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from food_api.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=True)
    phone = Column(String, nullable=True)

    # Доступ к админке (купоны, настройки)
    is_admin = Column(Boolean, default=False, nullable=False, server_default='false')

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
