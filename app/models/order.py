# app/models/order.py
from enum import Enum
from tortoise import Model, fields


class OrderStatus(str, Enum):
    """Enum for order statuses."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Order(Model):
    """
    Customer order. total_amount is always the sum of its items.
    """

    id = fields.IntField(pk=True)
    customer_name = fields.CharField(max_length=255)
    total_amount = fields.DecimalField(max_digits=10, decimal_places=2, default=0)
    order_date = fields.DatetimeField(index=True)
    status = fields.CharEnumField(OrderStatus, max_length=20, default=OrderStatus.PENDING)

    items: fields.ReverseRelation["OrderItem"]

    class Meta:
        table = "orders"
        ordering = ["-order_date"]

    def __str__(self) -> str:
        return f"Order {self.id} - {self.customer_name} ({self.status})"


class OrderItem(Model):
    """
    Line of an order with the unit price captured when the order was placed.
    """

    id = fields.IntField(pk=True)
    order = fields.ForeignKeyField(
        "models.Order",
        related_name="items",
        on_delete=fields.CASCADE
    )
    menu_item = fields.ForeignKeyField(
        "models.MenuItem",
        related_name="order_items",
        on_delete=fields.RESTRICT
    )
    quantity = fields.IntField()
    price_at_order = fields.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        table = "order_items"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.quantity} x {self.menu_item_id} @ {self.price_at_order}"
