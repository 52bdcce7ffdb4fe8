# food_api/models/order.py

from sqlalchemy import Column, Integer, Numeric, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from food_api.db.session import Base

ORDER_STATUS_CANCELLED = "Cancelled"


class Order(Base):
    """
    Заказ клиента. Оформление заказа живет в другом сервисе,
    здесь таблица нужна только для подсчета истории (купон FIRST_ORDER).
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String, nullable=False, default="Pending", server_default="Pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User")
