"""Discount rules for a single order.

Rules:
  - Whole order on a card whose id is in order.promotions: card discount %.
  - Whole order in points: points method discount %.
  - At least 10% of the order in points (rest on a card): flat 10%.
  - Any positive points amount excludes the card promo; the two are never summed.
"""
import logging
from collections.abc import Mapping

from src.po_common.cents import percent_of
from src.po_common.errors import InvalidArgumentError, InvalidOperationError
from src.po_payment.domain.models import POINTS_METHOD_ID, Order, PaymentMethod

logger = logging.getLogger(__name__)

PARTIAL_POINTS_PERCENT = 10


class DiscountEvaluator:
    """Stateless given the (read-only) method catalog."""

    def __init__(
        self,
        methods: Mapping[str, PaymentMethod],
        points_method_id: str = POINTS_METHOD_ID,
    ) -> None:
        self._methods = methods
        self._points_method_id = points_method_id

    @property
    def points_method(self) -> PaymentMethod | None:
        return self._methods.get(self._points_method_id)

    def full_traditional_discount(self, order: Order, method_id: str) -> int:
        """Discount for paying the whole order with method_id (cents)."""
        if method_id == self._points_method_id:
            raise InvalidOperationError(
                "card promo discount is not defined for the points method",
                order_id=order.id,
                method_id=method_id,
            )
        method = self._methods.get(method_id)
        if method is None:
            logger.warning("Unknown payment method %s for order %s, no discount", method_id, order.id)
            return 0
        if not order.has_promotion(method_id):
            return 0
        return percent_of(order.value, method.discount)

    def points_discount(self, order: Order, points_amount: int) -> int:
        """Discount for paying points_amount of the order in points (cents)."""
        if points_amount < 0 or points_amount > order.value:
            raise InvalidArgumentError(
                f"points amount {points_amount} must be within [0, {order.value}]",
                order_id=order.id,
                method_id=self._points_method_id,
            )
        if points_amount == 0:
            return 0
        if points_amount == order.value:
            points = self.points_method
            if points is None:
                logger.error("Points method %s missing, no discount for order %s",
                             self._points_method_id, order.id)
                return 0
            return percent_of(order.value, points.discount)
        # threshold compared on the untruncated 10%: amount >= value * 10 / 100
        if points_amount * 100 >= order.value * PARTIAL_POINTS_PERCENT:
            return percent_of(order.value, PARTIAL_POINTS_PERCENT)
        return 0

    def partial_points_amount(self, order: Order) -> int:
        """The 10%-of-value points amount used by the partial-points strategy."""
        return percent_of(order.value, PARTIAL_POINTS_PERCENT)

    def effective_value(
        self,
        order: Order,
        method_id: str | None = None,
        points_amount: int = 0,
    ) -> int:
        """Order value after the discount the given payment would earn."""
        if points_amount > 0:
            return order.value - self.points_discount(order, points_amount)
        if method_id is not None:
            return order.value - self.full_traditional_discount(order, method_id)
        return order.value
