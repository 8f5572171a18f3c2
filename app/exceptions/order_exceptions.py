# app/exceptions/order_exceptions.py
class OrderException(Exception):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundError(OrderException):
    """Raised when order is not found in database."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order with ID {order_id} not found")


class EmptyOrderError(OrderException):
    """Raised when an order is submitted without items."""

    def __init__(self, message: str = "Please select at least one item"):
        super().__init__(message)


class InvalidCustomerNameError(OrderException):
    """Raised when the customer name is missing or blank."""

    def __init__(self, message: str = "Customer name is required"):
        super().__init__(message)
