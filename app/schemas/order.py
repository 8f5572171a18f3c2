# app/schemas/order.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from app.models.order import OrderStatus
from app.schemas.common import format_amount


class OrderItemInputSchema(BaseModel):
    """Single cart line: menu item and requested quantity."""

    model_config = ConfigDict(populate_by_name=True)

    menu_item_id: int = Field(..., alias="menuItemId")
    quantity: int = Field(..., ge=1)


class OrderCreateSchema(BaseModel):
    """Schema for placing or replacing an order."""

    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(..., alias="customerName", max_length=255)
    items: List[OrderItemInputSchema] = Field(default_factory=list)


class OrderStatusUpdateSchema(BaseModel):
    """Schema for changing an order status."""

    status: OrderStatus


class OrderItemResponseSchema(BaseModel):
    menu_item_id: int
    item_name: str
    quantity: int
    price_at_order: str

    @classmethod
    def from_orm_item(cls, item) -> "OrderItemResponseSchema":
        """Build from an OrderItem with its menu_item fetched."""
        return cls(
            menu_item_id=item.menu_item_id,
            item_name=item.menu_item.name,
            quantity=item.quantity,
            price_at_order=format_amount(item.price_at_order)
        )


class OrderRowSchema(BaseModel):
    """Order record without its items."""

    id: int
    customer_name: str
    total_amount: str
    order_date: str
    status: str

    @classmethod
    def from_orm_order(cls, order) -> "OrderRowSchema":
        return cls(
            id=order.id,
            customer_name=order.customer_name,
            total_amount=format_amount(order.total_amount),
            order_date=order.order_date.isoformat(),
            status=OrderStatus(order.status).value
        )


class OrderResponseSchema(OrderRowSchema):
    """Order record with its resolved items."""

    items: List[OrderItemResponseSchema]

    @classmethod
    def from_orm_order_with_items(cls, order, items) -> "OrderResponseSchema":
        row = OrderRowSchema.from_orm_order(order)
        return cls(
            **row.model_dump(),
            items=[OrderItemResponseSchema.from_orm_item(item) for item in items]
        )


class OrderReceiptSchema(OrderResponseSchema):
    """Receipt returned after an order is placed."""

    message: str = "Order placed successfully"


class OrderUpdateResponseSchema(BaseModel):
    """Response returned after an order is replaced."""

    message: str = "Order updated successfully"
    order: OrderResponseSchema
