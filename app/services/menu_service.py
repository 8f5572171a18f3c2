# app/services/menu_service.py
import logging
from typing import List

from tortoise.exceptions import IntegrityError

from app.models.menu import MealType, MenuItem
from app.models.order import OrderItem
from app.schemas.menu import MenuItemWriteSchema
from app.exceptions.menu_exceptions import (
    MenuItemNotFoundError,
    MealTypeNotFoundError,
    MenuItemInUseError
)

logger = logging.getLogger(__name__)


class MenuService:
    """Service for meal types and menu items."""

    @staticmethod
    async def list_meal_types() -> List[MealType]:
        return await MealType.all().order_by("id")

    @staticmethod
    async def ensure_meal_types(names: List[str]) -> int:
        """
        Seed meal types when the table is empty.

        Args:
            names: Meal type names to create

        Returns:
            Number of meal types created
        """
        if not names or await MealType.exists():
            return 0

        for name in names:
            await MealType.create(name=name)

        logger.info(f"Seeded meal types: {', '.join(names)}")
        return len(names)

    @staticmethod
    async def get_available_menu(meal_type_id: int) -> List[MenuItem]:
        """Available menu items of one meal type, ordered by name."""
        return await MenuItem.filter(
            meal_type_id=meal_type_id,
            is_available=True
        ).order_by("name")

    @staticmethod
    async def list_all_menu_items() -> List[MenuItem]:
        """Every menu item, available or not, grouped by meal type."""
        return await MenuItem.all().order_by("meal_type_id", "name")

    @staticmethod
    async def get_menu_item(menu_item_id: int) -> MenuItem:
        """
        Retrieve a single menu item by ID.

        Raises:
            MenuItemNotFoundError: If menu item doesn't exist
        """
        menu_item = await MenuItem.get_or_none(id=menu_item_id)
        if not menu_item:
            raise MenuItemNotFoundError(menu_item_id)
        return menu_item

    @staticmethod
    async def _check_meal_type(meal_type_id: int) -> None:
        if not await MealType.exists(id=meal_type_id):
            raise MealTypeNotFoundError(meal_type_id)

    @staticmethod
    async def create_menu_item(data: MenuItemWriteSchema) -> MenuItem:
        """
        Create a new menu item.

        Args:
            data: Menu item data

        Returns:
            Created menu item

        Raises:
            MealTypeNotFoundError: If meal type doesn't exist
        """
        await MenuService._check_meal_type(data.meal_type_id)

        menu_item = await MenuItem.create(
            name=data.name,
            price=data.price,
            meal_type_id=data.meal_type_id,
            is_available=data.is_available
        )

        logger.info(f"Menu item created: {menu_item.id} - {menu_item.name}")
        return menu_item

    @staticmethod
    async def update_menu_item(menu_item_id: int, data: MenuItemWriteSchema) -> MenuItem:
        """
        Replace all editable fields of a menu item.

        Existing orders keep the price they were placed at.

        Raises:
            MenuItemNotFoundError: If menu item doesn't exist
            MealTypeNotFoundError: If meal type doesn't exist
        """
        menu_item = await MenuService.get_menu_item(menu_item_id)
        await MenuService._check_meal_type(data.meal_type_id)

        menu_item.name = data.name
        menu_item.price = data.price
        menu_item.meal_type_id = data.meal_type_id
        menu_item.is_available = data.is_available
        await menu_item.save()
        await menu_item.refresh_from_db()

        logger.info(f"Menu item updated: {menu_item.id} - {menu_item.name}")
        return menu_item

    @staticmethod
    async def delete_menu_item(menu_item_id: int) -> None:
        """
        Delete a menu item.

        Raises:
            MenuItemNotFoundError: If menu item doesn't exist
            MenuItemInUseError: If any order references the menu item
        """
        menu_item = await MenuService.get_menu_item(menu_item_id)

        if await OrderItem.exists(menu_item_id=menu_item.id):
            raise MenuItemInUseError(menu_item.id)

        try:
            await menu_item.delete()
        except IntegrityError:
            # Referenced by an order placed concurrently
            raise MenuItemInUseError(menu_item.id)

        logger.info(f"Menu item deleted: {menu_item_id}")
