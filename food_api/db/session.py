# food_api/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from food_api.core.config import settings

# Пул соединений предоставляет SQLAlchemy; pre_ping отбрасывает "мертвые" соединения
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
