# food_api/models/cart.py
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint

from food_api.db.session import Base


class CartItem(Base):
    __tablename__ = "cart_items"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    user = relationship("User")
    menu_item = relationship("MenuItem")

    # Одна строка корзины на пару (пользователь, блюдо)
    __table_args__ = (UniqueConstraint('user_id', 'menu_item_id', name='_user_menu_item_uc'),)
