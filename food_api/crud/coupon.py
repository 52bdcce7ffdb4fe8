# food_api/crud/coupon.py
from datetime import date
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from food_api.models.coupon import Coupon


def get_coupon_by_code(db: Session, code: str) -> Optional[Coupon]:
    """Поиск по уже нормализованному коду: в БД коды хранятся в верхнем регистре."""
    return db.query(Coupon).filter(Coupon.code == code).first()

def get_coupon(db: Session, coupon_id: int) -> Optional[Coupon]:
    return db.query(Coupon).filter(Coupon.id == coupon_id).first()

def get_all_coupons(db: Session) -> List[Coupon]:
    return db.query(Coupon).order_by(Coupon.id.desc()).all()

def get_active_coupons(db: Session, today: date) -> List[Coupon]:
    """Купоны, чье окно действия (включительно) содержит `today`."""
    return (
        db.query(Coupon)
        .filter(or_(Coupon.start_date.is_(None), Coupon.start_date <= today))
        .filter(or_(Coupon.end_date.is_(None), Coupon.end_date >= today))
        .order_by(Coupon.id.desc())
        .all()
    )

def create_coupon(db: Session, **fields) -> Coupon:
    coupon = Coupon(**fields)
    db.add(coupon)
    db.commit()
    db.refresh(coupon)
    return coupon

def update_coupon(db: Session, coupon: Coupon, **fields) -> Coupon:
    for key, value in fields.items():
        setattr(coupon, key, value)
    db.commit()
    db.refresh(coupon)
    return coupon

def delete_coupon(db: Session, coupon: Coupon):
    db.delete(coupon)
    db.commit()
