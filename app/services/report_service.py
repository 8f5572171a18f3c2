# app/services/report_service.py
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Tuple

from app.models.order import Order, OrderItem, OrderStatus
from app.schemas.common import to_money

PREPARATION_STATUSES = [OrderStatus.PENDING.value, OrderStatus.CONFIRMED.value]


class ReportService:
    """Read-only daily summaries for the canteen staff."""

    @staticmethod
    def _today_bounds() -> Tuple[datetime, datetime]:
        """
        Start and end of the current server-local calendar day, in UTC.

        Returns:
            Tuple of (start, end), end exclusive
        """
        now_local = datetime.now().astimezone()
        start_local = now_local.replace(hour=0, minute=0, second=0, microsecond=0)
        end_local = start_local + timedelta(days=1)
        return start_local.astimezone(timezone.utc), end_local.astimezone(timezone.utc)

    @staticmethod
    async def preparation_summary() -> List[Dict]:
        """
        Quantities to prepare for today's pending and confirmed orders.

        Returns:
            List of {"item_name", "total_quantity"} ordered by item name
        """
        start, end = ReportService._today_bounds()

        rows = await OrderItem.filter(
            order__status__in=PREPARATION_STATUSES,
            order__order_date__gte=start,
            order__order_date__lt=end
        ).values("menu_item__name", "quantity")

        totals: Dict[str, int] = {}
        for row in rows:
            name = row["menu_item__name"]
            totals[name] = totals.get(name, 0) + row["quantity"]

        return [
            {"item_name": name, "total_quantity": quantity}
            for name, quantity in sorted(totals.items())
        ]

    @staticmethod
    async def daily_orders() -> List[Order]:
        """Orders placed today, newest first."""
        start, end = ReportService._today_bounds()
        return await Order.filter(
            order_date__gte=start,
            order_date__lt=end
        ).order_by("-order_date", "-id")

    @staticmethod
    async def daily_financial_summary() -> Tuple[List[Order], Decimal]:
        """
        Today's orders and the sum of their totals.

        Returns:
            Tuple of (orders, total_amount)
        """
        orders = await ReportService.daily_orders()
        total = sum((to_money(order.total_amount) for order in orders), Decimal("0"))
        return orders, to_money(total)
