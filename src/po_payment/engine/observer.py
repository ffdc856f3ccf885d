"""Optional hooks for narrating a search run."""
import logging
from collections.abc import Sequence
from typing import Protocol

from src.po_common.cents import format_cents
from src.po_payment.domain.models import Order, PaymentAssignment
from src.po_payment.engine.ranking import SolutionScore


class SearchObserver(Protocol):
    def branch_entered(self, depth: int, assignment: PaymentAssignment) -> None: ...

    def dead_end(self, depth: int, order: Order) -> None: ...

    def solution_improved(
        self, score: SolutionScore, assignments: Sequence[PaymentAssignment]
    ) -> None: ...


class LoggingSearchObserver:
    """Writes branch decisions at DEBUG and new best solutions at INFO."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("po.search")

    def branch_entered(self, depth: int, assignment: PaymentAssignment) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "%sorder=%s %s method=%s points=%s card=%s discount=%s",
                "  " * depth,
                assignment.order_id,
                assignment.strategy.value,
                assignment.method_id,
                format_cents(assignment.points_amount),
                format_cents(assignment.traditional_amount),
                format_cents(assignment.discount),
            )

    def dead_end(self, depth: int, order: Order) -> None:
        self._logger.debug("%sorder=%s cannot be paid on this path", "  " * depth, order.id)

    def solution_improved(
        self, score: SolutionScore, assignments: Sequence[PaymentAssignment]
    ) -> None:
        self._logger.info(
            "New best: discount=%s points=%s (%d orders)",
            format_cents(score.total_discount),
            format_cents(score.total_points),
            len(assignments),
        )
