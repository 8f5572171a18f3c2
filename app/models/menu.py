# app/models/menu.py
from tortoise import Model, fields


class MealType(Model):
    """
    Category grouping menu items (breakfast, lunch, ...).
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100, unique=True)

    menu_items: fields.ReverseRelation["MenuItem"]

    class Meta:
        table = "meal_types"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class MenuItem(Model):
    """
    Menu item that customers can order.
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100, index=True)
    price = fields.DecimalField(max_digits=10, decimal_places=2)
    meal_type = fields.ForeignKeyField(
        "models.MealType",
        related_name="menu_items",
        on_delete=fields.RESTRICT
    )
    is_available = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "menu_items"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
