"""Discount resolution: turns a percent or amount discount into a flat amount."""

from typing import Optional

import schemas
from utils.splits import calculate_subtotal


def resolve_discount(discount: schemas.PercentDiscount | schemas.AmountDiscount, subtotal: float) -> float:
    """
    Resolve a discount variant to a flat monetary amount.

    Percent discounts apply to the item subtotal; amount discounts pass through.
    """
    if discount.type == "percent":
        return subtotal * discount.value / 100
    return discount.value


def build_split_input(request: schemas.SplitRequest, subtotal: Optional[float] = None) -> schemas.SplitInput:
    """Convert a request into calculator input with the discount already resolved."""
    if subtotal is None:
        subtotal = calculate_subtotal(request.items)

    return schemas.SplitInput(
        people=request.people,
        items=request.items,
        tax_amount=request.tax_amount,
        service_amount=request.service_amount,
        other_charges=request.other_charges,
        discount=resolve_discount(request.discount, subtotal),
        currency=request.currency,
        vendor_name=request.vendor_name,
        bill_date=request.bill_date
    )
