# food_api/models/coupon.py

from sqlalchemy import Column, Date, Integer, Numeric, String, Text
from food_api.db.session import Base


class Coupon(Base):
    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True, index=True)
    # Хранится в верхнем регистре, поиск по точному совпадению использует уникальный индекс
    code = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    # PERCENT | BUY_X | FIRST_ORDER | DATE_RANGE (см. food_api.services.pricing.CouponType)
    type = Column(String, nullable=False)
    # Проценты для PERCENT, фиксированная сумма для остальных типов
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    min_qty = Column(Integer, nullable=True)
    category = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    image_url = Column(String, nullable=True)
