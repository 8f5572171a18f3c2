# app/api/v1/endpoints/admin.py
from fastapi import APIRouter, Depends, Path, status
from typing import List

from app.schemas.menu import MenuItemWriteSchema, MenuItemResponseSchema
from app.schemas.order import OrderRowSchema, OrderStatusUpdateSchema
from app.schemas.report import PreparationItemSchema, FinancialTotalSchema
from app.schemas.common import format_amount
from app.services.menu_service import MenuService
from app.services.order_service import OrderService
from app.services.report_service import ReportService
from app.core.database import MAX_DB_ID
from app.api.v1.dependencies.auth import require_admin
from app.api.v1.dependencies.services import get_order_service
from app.api.v1.errors import error_response
from app.exceptions.menu_exceptions import (
    MenuItemNotFoundError,
    MealTypeNotFoundError,
    MenuItemInUseError
)
from app.exceptions.order_exceptions import OrderNotFoundError

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)]
)


@router.get("/all-menu-items", response_model=List[MenuItemResponseSchema])
async def get_all_menu_items() -> List[MenuItemResponseSchema]:
    """Retrieve every menu item, including unavailable ones."""
    menu_items = await MenuService.list_all_menu_items()
    return [MenuItemResponseSchema.from_orm_menu_item(m) for m in menu_items]


@router.post(
    "/menu-items",
    response_model=MenuItemResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_menu_item(data: MenuItemWriteSchema):
    """Create a menu item."""
    try:
        menu_item = await MenuService.create_menu_item(data)
    except MealTypeNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    return MenuItemResponseSchema.from_orm_menu_item(menu_item)


@router.put("/menu-items/{menu_item_id}", response_model=MenuItemResponseSchema)
async def update_menu_item(
        data: MenuItemWriteSchema,
        menu_item_id: int = Path(..., ge=1, le=MAX_DB_ID)
):
    """Replace a menu item."""
    try:
        menu_item = await MenuService.update_menu_item(menu_item_id, data)
    except MenuItemNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, "Menu item not found")
    except MealTypeNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    return MenuItemResponseSchema.from_orm_menu_item(menu_item)


@router.delete("/menu-items/{menu_item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu_item(menu_item_id: int = Path(..., ge=1, le=MAX_DB_ID)):
    """Delete a menu item that no order refers to."""
    try:
        await MenuService.delete_menu_item(menu_item_id)
    except MenuItemNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, "Menu item not found")
    except MenuItemInUseError as e:
        return error_response(status.HTTP_409_CONFLICT, str(e))


@router.get("/orders", response_model=List[OrderRowSchema])
async def get_all_orders(
        order_service: OrderService = Depends(get_order_service)
) -> List[OrderRowSchema]:
    """Retrieve all orders, newest first."""
    orders = await order_service.list_orders()
    return [OrderRowSchema.from_orm_order(o) for o in orders]


@router.put("/orders/{order_id}/status", response_model=OrderRowSchema)
async def update_order_status(
        data: OrderStatusUpdateSchema,
        order_id: int = Path(..., ge=1, le=MAX_DB_ID),
        order_service: OrderService = Depends(get_order_service)
):
    """Set the status of an order."""
    try:
        order = await order_service.update_order_status(order_id, data.status)
    except OrderNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, "Order not found")
    return OrderRowSchema.from_orm_order(order)


@router.get("/preparation-summary", response_model=List[PreparationItemSchema])
async def get_preparation_summary() -> List[PreparationItemSchema]:
    """Item quantities to prepare for today's pending and confirmed orders."""
    rows = await ReportService.preparation_summary()
    return [PreparationItemSchema(**row) for row in rows]


@router.get("/daily-financial-summary", response_model=List[OrderRowSchema])
async def get_daily_financial_summary() -> List[OrderRowSchema]:
    """Today's orders with their totals."""
    orders = await ReportService.daily_orders()
    return [OrderRowSchema.from_orm_order(o) for o in orders]


@router.get("/daily-financial-summary/total", response_model=FinancialTotalSchema)
async def get_daily_financial_total() -> FinancialTotalSchema:
    """Number of today's orders and the sum of their totals."""
    orders, total = await ReportService.daily_financial_summary()
    return FinancialTotalSchema(order_count=len(orders), total_amount=format_amount(total))
