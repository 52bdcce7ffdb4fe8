# food_api/models/catalog.py

from sqlalchemy import Column, Integer, String, Boolean, Numeric, Text
from food_api.db.session import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    # Свободная текстовая метка ("Pizza", "pizza " и т.п.), сравнивается без учета регистра
    category = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    available = Column(Boolean, default=True, nullable=False, server_default='true')
