"""Global enums shared by the domain, schemas and reports."""

from enum import Enum


class PaymentStrategy(str, Enum):
    """How a single order was paid in an assignment."""
    PROMO_CARD = "PROMO_CARD"              # whole order on a promoted card, card discount
    FULL_POINTS = "FULL_POINTS"            # whole order in points, points discount
    PARTIAL_POINTS = "PARTIAL_POINTS"      # 10% in points + remainder on one card
    CARD_NO_DISCOUNT = "CARD_NO_DISCOUNT"  # whole order on a card, no discount
