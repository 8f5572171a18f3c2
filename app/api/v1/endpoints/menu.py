# app/api/v1/endpoints/menu.py
from fastapi import APIRouter, Path
from typing import List

from app.schemas.menu import MealTypeResponseSchema, MenuItemResponseSchema
from app.services.menu_service import MenuService
from app.core.database import MAX_DB_ID

router = APIRouter(tags=["menu"])


@router.get("/meal-types", response_model=List[MealTypeResponseSchema])
async def get_meal_types() -> List[MealTypeResponseSchema]:
    """Retrieve all meal types."""
    meal_types = await MenuService.list_meal_types()
    return [MealTypeResponseSchema.from_orm_meal_type(m) for m in meal_types]


@router.get("/menu/{meal_type_id}", response_model=List[MenuItemResponseSchema])
async def get_menu(
        meal_type_id: int = Path(..., ge=1, le=MAX_DB_ID)
) -> List[MenuItemResponseSchema]:
    """Retrieve available menu items of a meal type."""
    menu_items = await MenuService.get_available_menu(meal_type_id)
    return [MenuItemResponseSchema.from_orm_menu_item(m) for m in menu_items]
