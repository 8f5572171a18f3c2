# app/schemas/menu.py
from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal

from app.schemas.common import format_amount


class MealTypeResponseSchema(BaseModel):
    id: int
    name: str

    @classmethod
    def from_orm_meal_type(cls, meal_type) -> "MealTypeResponseSchema":
        return cls(id=meal_type.id, name=meal_type.name)


class MenuItemWriteSchema(BaseModel):
    """Schema for creating or replacing a menu item."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    meal_type_id: int = Field(..., alias="mealTypeId")
    is_available: bool = Field(True, alias="isAvailable")


class MenuItemResponseSchema(BaseModel):
    """Schema for menu item responses."""

    id: int
    name: str
    price: str
    meal_type_id: int
    is_available: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_orm_menu_item(cls, menu_item) -> "MenuItemResponseSchema":
        """
        Create response schema from ORM model.

        Args:
            menu_item: MenuItem ORM model

        Returns:
            MenuItemResponseSchema instance
        """
        return cls(
            id=menu_item.id,
            name=menu_item.name,
            price=format_amount(menu_item.price),
            meal_type_id=menu_item.meal_type_id,
            is_available=menu_item.is_available,
            created_at=menu_item.created_at.isoformat(),
            updated_at=menu_item.updated_at.isoformat()
        )
