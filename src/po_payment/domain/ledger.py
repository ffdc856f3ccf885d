"""Capacity ledger: remaining spend per payment method for one search run.

The ledger is an arena keyed by method id holding int cents, so a use followed
by a release of the same amount restores the exact previous value. It is
owned by a single allocator run and never shared.
"""
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from src.po_common.errors import InvalidArgumentError
from src.po_payment.domain.models import PaymentMethod


class CapacityLedger:
    def __init__(self, methods: Iterable[PaymentMethod]) -> None:
        self._limits: dict[str, int] = {}
        self._remaining: dict[str, int] = {}
        for method in methods:
            self._limits[method.id] = method.limit
            self._remaining[method.id] = method.limit

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._remaining

    def limit(self, method_id: str) -> int:
        self._require_known(method_id)
        return self._limits[method_id]

    def remaining(self, method_id: str) -> int:
        self._require_known(method_id)
        return self._remaining[method_id]

    def can_use(self, method_id: str, amount: int) -> bool:
        return self.remaining(method_id) >= amount

    def snapshot(self) -> dict[str, int]:
        return dict(self._remaining)

    def try_use(self, method_id: str, amount: int) -> bool:
        """Draw amount from method_id. Returns False, unchanged, if it does not fit."""
        self._require_non_negative(method_id, amount)
        self._require_known(method_id)
        if self._remaining[method_id] < amount:
            return False
        self._remaining[method_id] -= amount
        return True

    def release(self, method_id: str, amount: int) -> None:
        """Undo a successful try_use of the same amount."""
        self._require_non_negative(method_id, amount)
        self._require_known(method_id)
        restored = self._remaining[method_id] + amount
        if restored > self._limits[method_id]:
            raise InvalidArgumentError(
                f"release of {amount} would exceed limit {self._limits[method_id]}",
                method_id=method_id,
            )
        self._remaining[method_id] = restored

    @contextmanager
    def holding(self, draws: Iterable[tuple[str, int]]) -> Iterator[bool]:
        """Draw every (method_id, amount) for the duration of the block.

        Yields True when all draws fit. Otherwise the draws already taken are
        returned and False is yielded. Every successful draw is released when
        the block exits, including on exceptions.
        """
        taken: list[tuple[str, int]] = []
        try:
            for method_id, amount in draws:
                if not self.try_use(method_id, amount):
                    break
                taken.append((method_id, amount))
            else:
                yield True
                return
            for method_id, amount in reversed(taken):
                self.release(method_id, amount)
            taken.clear()
            yield False
        finally:
            for method_id, amount in reversed(taken):
                self.release(method_id, amount)

    def _require_known(self, method_id: str) -> None:
        if method_id not in self._remaining:
            raise InvalidArgumentError("unknown payment method", method_id=method_id)

    @staticmethod
    def _require_non_negative(method_id: str, amount: int) -> None:
        if amount < 0:
            raise InvalidArgumentError(f"amount must be non-negative, got {amount}", method_id=method_id)
