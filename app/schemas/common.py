# app/schemas/common.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")


def to_money(value: Union[Decimal, int, float, str]) -> Decimal:
    """Quantize a monetary value to two decimal places."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Union[Decimal, int, float, str]) -> str:
    """Render a monetary value as a string with two decimals, e.g. "100.00"."""
    return f"{to_money(value):.2f}"
