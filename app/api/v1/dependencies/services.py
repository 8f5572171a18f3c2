# app/api/v1/dependencies/services.py
from app.core.database import DEFAULT_CONNECTION
from app.services.order_service import OrderService


def get_order_service() -> OrderService:
    """Order service bound to the default connection pool."""
    return OrderService(DEFAULT_CONNECTION)
