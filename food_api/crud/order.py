# food_api/crud/order.py
from sqlalchemy.orm import Session
from food_api.models.order import Order, ORDER_STATUS_CANCELLED


def count_user_orders(db: Session, user_id: int) -> int:
    """Сколько заказов пользователь уже оформил (отмененные не считаются)."""
    return (
        db.query(Order)
        .filter(Order.user_id == user_id, Order.status != ORDER_STATUS_CANCELLED)
        .count()
    )
