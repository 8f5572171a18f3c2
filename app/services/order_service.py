# app/services/order_service.py
import logging
from decimal import Decimal
from typing import List, Sequence, Tuple

from tortoise import connections
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.transactions import in_transaction

from app.core.database import DEFAULT_CONNECTION
from app.core.security import get_current_utc_time
from app.models.menu import MenuItem
from app.models.order import Order, OrderItem, OrderStatus
from app.schemas.common import to_money
from app.schemas.order import OrderItemInputSchema
from app.exceptions.menu_exceptions import MenuItemNotFoundError
from app.exceptions.order_exceptions import (
    OrderNotFoundError,
    EmptyOrderError,
    InvalidCustomerNameError
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Places and replaces orders atomically.

    Every write runs inside one scoped transaction on the configured
    connection: it commits when the block exits normally, rolls back on any
    exception and always hands the connection back to the pool.
    """

    def __init__(self, connection_name: str = DEFAULT_CONNECTION):
        self.connection_name = connection_name

    @property
    def db(self) -> BaseDBAsyncClient:
        """Pooled client used for reads outside a transaction."""
        return connections.get(self.connection_name)

    @staticmethod
    def _validate_cart(customer_name: str, items: Sequence[OrderItemInputSchema]) -> str:
        """
        Reject carts that must never reach the store.

        Returns:
            Customer name stripped of surrounding whitespace

        Raises:
            EmptyOrderError: If no items were selected
            InvalidCustomerNameError: If the customer name is blank
        """
        if not items:
            raise EmptyOrderError()

        name = (customer_name or "").strip()
        if not name:
            raise InvalidCustomerNameError()
        return name

    @staticmethod
    async def _price_items(
        items: Sequence[OrderItemInputSchema],
        connection: BaseDBAsyncClient
    ) -> Tuple[Decimal, List[Tuple[MenuItem, int]]]:
        """
        Resolve each cart line against the menu and compute the order total.

        The unit price read here is the price captured on the order item.

        Raises:
            MenuItemNotFoundError: If any menu item id does not exist
        """
        total = Decimal("0")
        priced = []

        for item in items:
            menu_item = await MenuItem.get_or_none(id=item.menu_item_id, using_db=connection)
            if not menu_item:
                raise MenuItemNotFoundError(item.menu_item_id)

            price = to_money(menu_item.price)
            total += price * item.quantity
            priced.append((menu_item, item.quantity))

        return to_money(total), priced

    @staticmethod
    async def _insert_items(
        order: Order,
        priced: List[Tuple[MenuItem, int]],
        connection: BaseDBAsyncClient
    ) -> None:
        await OrderItem.bulk_create(
            [
                OrderItem(
                    order_id=order.id,
                    menu_item_id=menu_item.id,
                    quantity=quantity,
                    price_at_order=to_money(menu_item.price)
                )
                for menu_item, quantity in priced
            ],
            using_db=connection
        )

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        """Order items with their menu item names, in insertion order."""
        return await (
            OrderItem.filter(order_id=order_id)
            .using_db(self.db)
            .order_by("id")
            .prefetch_related("menu_item")
        )

    async def create_order(
        self,
        customer_name: str,
        items: Sequence[OrderItemInputSchema]
    ) -> Tuple[Order, List[OrderItem]]:
        """
        Place a new order.

        Args:
            customer_name: Name the order is placed under
            items: Requested menu items and quantities

        Returns:
            Tuple of (order, order_items) read after commit

        Raises:
            EmptyOrderError: If items is empty
            InvalidCustomerNameError: If customer_name is blank
            MenuItemNotFoundError: If a menu item does not exist (nothing is persisted)
        """
        name = self._validate_cart(customer_name, items)

        async with in_transaction(self.connection_name) as connection:
            total, priced = await self._price_items(items, connection)

            order = await Order.create(
                customer_name=name,
                total_amount=total,
                order_date=get_current_utc_time(),
                status=OrderStatus.PENDING,
                using_db=connection
            )
            await self._insert_items(order, priced, connection)

        logger.info(f"Order placed: {order.id} - {name} ({len(priced)} items, total {total})")

        return order, await self.get_order_items(order.id)

    async def update_order(
        self,
        order_id: int,
        customer_name: str,
        items: Sequence[OrderItemInputSchema]
    ) -> Tuple[Order, List[OrderItem]]:
        """
        Replace the contents of an existing order.

        The new item list fully replaces the old one. Status is kept, the
        order date is refreshed. Deleting the old items, updating the order
        and inserting the new items commit or roll back together.

        Args:
            order_id: ID of the order to replace
            customer_name: New customer name
            items: Complete desired item list

        Returns:
            Tuple of (order, order_items) read after commit

        Raises:
            EmptyOrderError: If items is empty
            InvalidCustomerNameError: If customer_name is blank
            OrderNotFoundError: If the order does not exist
            MenuItemNotFoundError: If a menu item does not exist (order left unchanged)
        """
        name = self._validate_cart(customer_name, items)

        async with in_transaction(self.connection_name) as connection:
            order = await Order.get_or_none(id=order_id, using_db=connection)
            if not order:
                raise OrderNotFoundError(order_id)

            await OrderItem.filter(order_id=order.id).using_db(connection).delete()

            total, priced = await self._price_items(items, connection)

            order.customer_name = name
            order.total_amount = total
            order.order_date = get_current_utc_time()
            await order.save(
                using_db=connection,
                update_fields=["customer_name", "total_amount", "order_date"]
            )

            await self._insert_items(order, priced, connection)

        logger.info(f"Order updated: {order.id} - {name} ({len(priced)} items, total {total})")

        order = await Order.get(id=order_id, using_db=self.db)
        return order, await self.get_order_items(order.id)

    async def get_order(self, order_id: int) -> Tuple[Order, List[OrderItem]]:
        """
        Retrieve an order with its items.

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order = await Order.get_or_none(id=order_id, using_db=self.db)
        if not order:
            raise OrderNotFoundError(order_id)
        return order, await self.get_order_items(order.id)

    async def list_orders(self) -> List[Order]:
        """All orders, newest first."""
        return await Order.all().using_db(self.db).order_by("-order_date", "-id")

    async def update_order_status(self, order_id: int, status: OrderStatus) -> Order:
        """
        Set the status of an order. Any status may follow any other.

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order = await Order.get_or_none(id=order_id, using_db=self.db)
        if not order:
            raise OrderNotFoundError(order_id)

        previous = OrderStatus(order.status)
        order.status = OrderStatus(status)
        await order.save(using_db=self.db, update_fields=["status"])

        logger.info(f"Order {order.id} status changed: {previous.value} -> {order.status.value}")
        return order
