"""Backtracking payment allocator.

Explores every way to pay every order and keeps the complete assignment with
the largest total discount; ties go to the one redeeming more points.

For each order, strategies are tried in this order:
  1. whole order on each promoted card (card discount)
  2. whole order in points (points discount)
  3. exactly 10% in points + remainder on one card, one branch per card
  4. whole order on each card without a positive promo (no discount)

Each branch draws capacity through CapacityLedger.holding, which returns it
when the branch is left, so the ledger is back to its starting state after
every sibling attempt.
"""
import logging
from collections.abc import Iterable, Iterator, Sequence

from src.po_common.cents import format_cents
from src.po_common.enums import PaymentStrategy
from src.po_payment.domain.discount import DiscountEvaluator
from src.po_payment.domain.ledger import CapacityLedger
from src.po_payment.domain.models import (
    POINTS_METHOD_ID,
    AllocationResult,
    Order,
    PaymentAssignment,
    PaymentMethod,
)
from src.po_payment.engine.observer import SearchObserver
from src.po_payment.engine.ranking import SolutionScore, is_better

logger = logging.getLogger(__name__)

Draw = tuple[str, int]  # (method_id, cents)


class PaymentAllocator:
    def __init__(
        self,
        orders: Sequence[Order],
        methods: Iterable[PaymentMethod],
        points_method_id: str = POINTS_METHOD_ID,
        observer: SearchObserver | None = None,
    ) -> None:
        # Largest orders first: prunes infeasible paths earlier. The search is
        # exhaustive, so the optimum does not depend on this order.
        self._orders: list[Order] = sorted(orders, key=lambda o: o.value, reverse=True)
        self._methods: dict[str, PaymentMethod] = {m.id: m for m in methods}
        self._points_method_id = points_method_id
        self._cards: list[PaymentMethod] = [
            m for m in self._methods.values() if m.id != points_method_id
        ]
        self._evaluator = DiscountEvaluator(self._methods, points_method_id)
        self._observer = observer
        # per-run state, reset by allocate()
        self._ledger = CapacityLedger(self._methods.values())
        self._path: list[PaymentAssignment] = []
        self._best: tuple[PaymentAssignment, ...] | None = None
        self._best_score: SolutionScore | None = None
        self._leaves = 0

    @property
    def orders(self) -> list[Order]:
        """Orders in search order (descending value)."""
        return list(self._orders)

    def allocate(self) -> AllocationResult:
        """Run the full search. Returns an empty result if no complete assignment exists."""
        self._ledger = CapacityLedger(self._methods.values())
        self._path = []
        self._best = None
        self._best_score = None
        self._leaves = 0
        initial = self._ledger.snapshot()

        logger.info(
            "Starting payment optimization: %d orders, %d payment methods",
            len(self._orders), len(self._methods),
        )
        self._descend(0, 0, 0)
        assert self._ledger.snapshot() == initial, "ledger not restored after search"

        if self._best is None or self._best_score is None:
            logger.warning(
                "No complete assignment pays all %d orders (%d leaves explored)",
                len(self._orders), self._leaves,
            )
            return AllocationResult(explored_leaves=self._leaves)

        logger.info(
            "Best solution: discount=%s points=%s (%d leaves explored)",
            format_cents(self._best_score.total_discount),
            format_cents(self._best_score.total_points),
            self._leaves,
        )
        return AllocationResult(
            assignments=self._best,
            total_discount=self._best_score.total_discount,
            total_points=self._best_score.total_points,
            explored_leaves=self._leaves,
        )

    def _descend(self, depth: int, total_discount: int, total_points: int) -> None:
        if depth == len(self._orders):
            self._record_leaf(SolutionScore(total_discount, total_points))
            return

        order = self._orders[depth]
        paid = False
        for assignment, draws in self._candidates(order):
            with self._ledger.holding(draws) as held:
                if not held:
                    continue
                paid = True
                self._path.append(assignment)
                try:
                    if self._observer is not None:
                        self._observer.branch_entered(depth, assignment)
                    self._descend(
                        depth + 1,
                        total_discount + assignment.discount,
                        total_points + assignment.points_amount,
                    )
                finally:
                    self._path.pop()

        if not paid and self._observer is not None:
            self._observer.dead_end(depth, order)

    def _record_leaf(self, score: SolutionScore) -> None:
        self._leaves += 1
        if not is_better(score, self._best_score):
            return
        self._best = tuple(self._path)
        self._best_score = score
        if self._observer is not None:
            self._observer.solution_improved(score, self._best)

    def _candidates(self, order: Order) -> Iterator[tuple[PaymentAssignment, list[Draw]]]:
        """Yield (assignment, draws) for every strategy; feasibility is left to the ledger."""
        evaluator = self._evaluator
        points_id = self._points_method_id

        # 1. whole order on a promoted card
        for promo_id in order.promotions:
            if promo_id == points_id or promo_id not in self._methods:
                continue
            discount = evaluator.full_traditional_discount(order, promo_id)
            amount = order.value - discount
            yield (
                PaymentAssignment(order.id, PaymentStrategy.PROMO_CARD, promo_id, 0, amount, discount),
                [(promo_id, amount)],
            )

        if points_id in self._methods:
            # 2. whole order in points; the full pre-discount value is drawn
            discount = evaluator.points_discount(order, order.value)
            yield (
                PaymentAssignment(order.id, PaymentStrategy.FULL_POINTS, None, order.value, 0, discount),
                [(points_id, order.value)],
            )

            # 3. 10% in points + remainder on one card
            points_amount = evaluator.partial_points_amount(order)
            if 0 < points_amount < order.value:
                discount = evaluator.points_discount(order, points_amount)
                if discount > 0:
                    remainder = order.value - discount - points_amount
                    for card in self._cards:
                        yield (
                            PaymentAssignment(
                                order.id, PaymentStrategy.PARTIAL_POINTS, card.id,
                                points_amount, remainder, discount,
                            ),
                            [(points_id, points_amount), (card.id, remainder)],
                        )

        # 4. whole order on a card, no discount
        for card in self._cards:
            if order.has_promotion(card.id) and evaluator.full_traditional_discount(order, card.id) > 0:
                continue  # covered by strategy 1
            yield (
                PaymentAssignment(order.id, PaymentStrategy.CARD_NO_DISCOUNT, card.id, 0, order.value, 0),
                [(card.id, order.value)],
            )
