"""Payment domain models — pure dataclasses, amounts in int cents."""
from dataclasses import dataclass, field

from src.po_common.enums import PaymentStrategy

POINTS_METHOD_ID = "PUNKTY"


@dataclass(frozen=True)
class Order:
    id: str
    value: int  # cents
    promotions: tuple[str, ...] = ()  # method ids with a full-payment promo

    def __post_init__(self) -> None:
        # de-duplicate, keep first occurrence so iteration stays deterministic
        object.__setattr__(self, "promotions", tuple(dict.fromkeys(self.promotions)))

    def has_promotion(self, method_id: str) -> bool:
        return method_id in self.promotions


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    discount: int  # percent 0-100
    limit: int  # cents, original spending cap


@dataclass(frozen=True)
class PaymentAssignment:
    """How one order is paid on a complete search path."""

    order_id: str
    strategy: PaymentStrategy
    method_id: str | None  # traditional method, None when paid only in points
    points_amount: int  # cents drawn from the points method
    traditional_amount: int  # cents drawn from method_id
    discount: int  # cents

    @property
    def uses_points(self) -> bool:
        return self.points_amount > 0


@dataclass(frozen=True)
class AllocationResult:
    """Best complete assignment of a search run.

    assignments is None when no combination pays every order within the
    limits; that is an expected outcome, distinct from a zero-discount success.
    """

    assignments: tuple[PaymentAssignment, ...] | None = None
    total_discount: int = 0
    total_points: int = 0
    explored_leaves: int = field(default=0, compare=False)

    @property
    def found(self) -> bool:
        return self.assignments is not None
