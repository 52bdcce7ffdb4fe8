# food_api/schemas/catalog.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class MenuItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[str] = None
    image_url: Optional[str] = None


class MenuItemAdminSchema(MenuItemSchema):
    """Блюдо в админке: видны и снятые с продажи позиции."""
    available: bool


class MenuItemCreate(BaseModel):
    """Схема для создания или полной замены блюда (админка)."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    category: Optional[str] = None
    image_url: Optional[str] = None
    available: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("category", "description", "image_url")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
