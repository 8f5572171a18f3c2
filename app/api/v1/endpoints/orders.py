# app/api/v1/endpoints/orders.py
import logging
from fastapi import APIRouter, Depends, Path, status

from app.schemas.order import (
    OrderCreateSchema,
    OrderResponseSchema,
    OrderReceiptSchema,
    OrderUpdateResponseSchema
)
from app.services.order_service import OrderService
from app.core.database import MAX_DB_ID
from app.api.v1.dependencies.services import get_order_service
from app.api.v1.errors import error_response
from app.exceptions.menu_exceptions import MenuItemNotFoundError
from app.exceptions.order_exceptions import (
    OrderNotFoundError,
    EmptyOrderError,
    InvalidCustomerNameError
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderReceiptSchema,
    status_code=status.HTTP_201_CREATED
)
async def place_order(
        order_data: OrderCreateSchema,
        order_service: OrderService = Depends(get_order_service)
):
    """
    Place a new order and return its receipt.

    Raises:
        400 if the cart is empty or the name is blank, 404 if a menu item
        doesn't exist, 500 if the transaction fails
    """
    try:
        order, items = await order_service.create_order(
            order_data.customer_name,
            order_data.items
        )
    except (EmptyOrderError, InvalidCustomerNameError) as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except MenuItemNotFoundError as e:
        logger.warning(f"Order rolled back: {e}")
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except Exception as e:
        logger.exception("Error placing order")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to place order",
            str(e)
        )

    receipt = OrderResponseSchema.from_orm_order_with_items(order, items)
    return OrderReceiptSchema(**receipt.model_dump())


@router.get("/{order_id}", response_model=OrderResponseSchema)
async def get_order(
        order_id: int = Path(..., ge=1, le=MAX_DB_ID),
        order_service: OrderService = Depends(get_order_service)
):
    """Retrieve an order with its items (receipt view)."""
    try:
        order, items = await order_service.get_order(order_id)
    except OrderNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, "Order not found")

    return OrderResponseSchema.from_orm_order_with_items(order, items)


@router.put("/{order_id}", response_model=OrderUpdateResponseSchema)
async def update_order(
        order_data: OrderCreateSchema,
        order_id: int = Path(..., ge=1, le=MAX_DB_ID),
        order_service: OrderService = Depends(get_order_service)
):
    """
    Replace the customer name and the whole item list of an order.

    Raises:
        400 if the cart is empty or the name is blank, 404 if the order or a
        menu item doesn't exist, 500 if the transaction fails
    """
    try:
        order, items = await order_service.update_order(
            order_id,
            order_data.customer_name,
            order_data.items
        )
    except (EmptyOrderError, InvalidCustomerNameError) as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except (OrderNotFoundError, MenuItemNotFoundError) as e:
        logger.warning(f"Order update rolled back: {e}")
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except Exception as e:
        logger.exception(f"Error updating order {order_id}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to update order",
            str(e)
        )

    return OrderUpdateResponseSchema(
        order=OrderResponseSchema.from_orm_order_with_items(order, items)
    )
