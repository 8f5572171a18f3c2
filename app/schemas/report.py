# app/schemas/report.py
from pydantic import BaseModel


class PreparationItemSchema(BaseModel):
    """Quantity of one menu item still to be prepared today."""

    item_name: str
    total_quantity: int


class FinancialTotalSchema(BaseModel):
    """Sum of today's order totals."""

    order_count: int
    total_amount: str
