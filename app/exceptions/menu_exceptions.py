# app/exceptions/menu_exceptions.py
class MenuException(Exception):
    """Base exception for menu-related errors."""
    pass


class MenuItemNotFoundError(MenuException):
    """Raised when menu item is not found in database."""

    def __init__(self, menu_item_id: int):
        self.menu_item_id = menu_item_id
        super().__init__(f"Menu item with ID {menu_item_id} not found")


class MealTypeNotFoundError(MenuException):
    """Raised when meal type is not found in database."""

    def __init__(self, meal_type_id: int):
        self.meal_type_id = meal_type_id
        super().__init__(f"Meal type with ID {meal_type_id} not found")


class MenuItemInUseError(MenuException):
    """Raised when a menu item referenced by orders is deleted."""

    def __init__(self, menu_item_id: int):
        self.menu_item_id = menu_item_id
        super().__init__(
            f"Menu item with ID {menu_item_id} is part of existing orders and cannot be deleted"
        )
