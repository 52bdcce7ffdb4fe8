# tests/conftest.py
import os

# Тесты не должны ходить в Postgres: движок в food_api.db.session создается при импорте
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from food_api.core.limiter import limiter
from food_api.core.security import create_access_token
from food_api.db.session import Base
from food_api.dependencies import get_db, get_today
from food_api.main import app
from food_api.models import user, catalog, cart, coupon, order, settings  # Импортируем все модели для создания таблиц
from food_api.models.catalog import MenuItem
from food_api.models.coupon import Coupon
from food_api.models.order import Order
from food_api.models.settings import AppSettings
from food_api.models.user import User

# Используем in-memory SQLite для тестов - это быстро и изолированно
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Фиксированное "сегодня" для всех проверок окна действия купонов
TODAY = date(2026, 3, 15)
DELIVERY_FEE = Decimal("30.00")


@pytest.fixture
def today():
    return TODAY


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Фикстура для создания чистой базы данных для каждого теста.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def shop_settings(db_session):
    row = AppSettings(id=1, app_name="Test Kitchen", delivery_fee=DELIVERY_FEE)
    db_session.add(row)
    db_session.commit()
    return row


@pytest.fixture
def test_user(db_session):
    user = User(name="Customer", email="customer@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def admin_user(db_session):
    user = User(name="Admin", email="admin@example.com", is_admin=True)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def auth_headers(test_user):
    token = create_access_token({"sub": str(test_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_auth_headers(admin_user):
    token = create_access_token({"sub": str(admin_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_menu_item(db_session):
    def _make(name="Margherita", price="250.00", category="Pizza", **extra):
        item = MenuItem(name=name, price=Decimal(price), category=category, **extra)
        db_session.add(item)
        db_session.commit()
        return item
    return _make


@pytest.fixture
def make_coupon(db_session):
    def _make(code="SAVE10", type="PERCENT", discount="10", **extra):
        coupon = Coupon(code=code, type=type, discount=Decimal(discount), **extra)
        db_session.add(coupon)
        db_session.commit()
        return coupon
    return _make


@pytest.fixture
def make_order(db_session):
    def _make(user, status="Delivered", total="100.00"):
        order = Order(user_id=user.id, status=status, total=Decimal(total))
        db_session.add(order)
        db_session.commit()
        return order
    return _make
