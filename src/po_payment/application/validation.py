"""Cross-record checks on a loaded batch.

Per-record checks (blank ids, negative amounts, discount range) live in the
pydantic schemas; these need the whole batch.
"""
from collections.abc import Sequence

from src.po_common.errors import DataValidationError
from src.po_payment.application.schemas import OrderIn, PaymentMethodIn


def validate_batch(
    orders: Sequence[OrderIn],
    methods: Sequence[PaymentMethodIn],
    points_method_id: str,
) -> None:
    """Raise DataValidationError on duplicate ids or unknown promotion ids."""
    method_ids: set[str] = set()
    for method in methods:
        if method.id in method_ids:
            raise DataValidationError(f"duplicate payment method id '{method.id}'")
        method_ids.add(method.id)

    order_ids: set[str] = set()
    for order in orders:
        if order.id in order_ids:
            raise DataValidationError(f"duplicate order id '{order.id}'")
        order_ids.add(order.id)
        for promo_id in order.promotions or ():
            if promo_id not in method_ids and promo_id != points_method_id:
                raise DataValidationError(
                    f"unknown promotion id '{promo_id}' for order '{order.id}'; "
                    "promotions must match a payment method id"
                )
