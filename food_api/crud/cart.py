# food_api/crud/cart.py
from typing import List, Tuple
from sqlalchemy.orm import Session
from food_api.models.cart import CartItem
from food_api.models.catalog import MenuItem

# --- CRUD для Корзины ---

def get_cart_lines(db: Session, user_id: int) -> List[Tuple[CartItem, MenuItem]]:
    """Строки корзины пользователя вместе с данными блюда из меню."""
    return (
        db.query(CartItem, MenuItem)
        .join(MenuItem, MenuItem.id == CartItem.menu_item_id)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id)
        .all()
    )

def add_or_update_cart_item(db: Session, user_id: int, menu_item_id: int, quantity: int) -> CartItem:
    """
    Добавляет блюдо в корзину или перезаписывает количество.
    Конкурентные обновления одной строки не согласуются: побеждает последняя запись.
    """
    item = db.query(CartItem).filter_by(user_id=user_id, menu_item_id=menu_item_id).first()

    if item:
        item.quantity = quantity
    else:
        item = CartItem(user_id=user_id, menu_item_id=menu_item_id, quantity=quantity)
        db.add(item)
    db.commit()
    db.refresh(item)
    return item

def remove_cart_item(db: Session, user_id: int, menu_item_id: int) -> bool:
    item = db.query(CartItem).filter_by(user_id=user_id, menu_item_id=menu_item_id).first()
    if item:
        db.delete(item)
        db.commit()
        return True
    return False

def clear_cart(db: Session, user_id: int):
    """Полностью очищает корзину пользователя."""
    db.query(CartItem).filter_by(user_id=user_id).delete()
    db.commit()
