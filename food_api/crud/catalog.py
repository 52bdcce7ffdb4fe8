# food_api/crud/catalog.py
from typing import List, Optional
from sqlalchemy.orm import Session
from food_api.models.cart import CartItem
from food_api.models.catalog import MenuItem


def get_menu_item(db: Session, menu_item_id: int) -> Optional[MenuItem]:
    return db.query(MenuItem).filter(MenuItem.id == menu_item_id).first()

def get_available_menu_items(db: Session) -> List[MenuItem]:
    return db.query(MenuItem).filter(MenuItem.available.is_(True)).order_by(MenuItem.category, MenuItem.name).all()

def get_all_menu_items(db: Session) -> List[MenuItem]:
    return db.query(MenuItem).order_by(MenuItem.category, MenuItem.name).all()

def create_menu_item(db: Session, **fields) -> MenuItem:
    menu_item = MenuItem(**fields)
    db.add(menu_item)
    db.commit()
    db.refresh(menu_item)
    return menu_item

def update_menu_item(db: Session, menu_item: MenuItem, **fields) -> MenuItem:
    for key, value in fields.items():
        setattr(menu_item, key, value)
    db.commit()
    db.refresh(menu_item)
    return menu_item

def delete_menu_item(db: Session, menu_item: MenuItem):
    # Строки корзин ссылаются на блюдо внешним ключом
    db.query(CartItem).filter(CartItem.menu_item_id == menu_item.id).delete(synchronize_session=False)
    db.delete(menu_item)
    db.commit()
