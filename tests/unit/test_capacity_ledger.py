"""Tests for CapacityLedger: use/release pairing and guarded holds."""

import pytest

from src.po_common.errors import InvalidArgumentError
from src.po_payment.domain.ledger import CapacityLedger
from src.po_payment.domain.models import PaymentMethod


def _ledger() -> CapacityLedger:
    return CapacityLedger([
        PaymentMethod(id="PUNKTY", discount=15, limit=10000),
        PaymentMethod(id="mZysk", discount=10, limit=18000),
    ])


class TestTryUse:
    def test_seeded_from_limits(self) -> None:
        ledger = _ledger()
        assert ledger.remaining("mZysk") == 18000
        assert ledger.limit("mZysk") == 18000
        assert "PUNKTY" in ledger
        assert "FakeBank" not in ledger

    def test_success_subtracts(self) -> None:
        ledger = _ledger()
        assert ledger.try_use("mZysk", 16500) is True
        assert ledger.remaining("mZysk") == 1500

    def test_exact_fit(self) -> None:
        ledger = _ledger()
        assert ledger.try_use("PUNKTY", 10000) is True
        assert ledger.remaining("PUNKTY") == 0

    def test_insufficient_returns_false_unchanged(self) -> None:
        ledger = _ledger()
        assert ledger.try_use("PUNKTY", 10001) is False
        assert ledger.remaining("PUNKTY") == 10000

    def test_zero_amount(self) -> None:
        ledger = _ledger()
        assert ledger.try_use("PUNKTY", 0) is True
        assert ledger.remaining("PUNKTY") == 10000

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="mZysk"):
            _ledger().try_use("mZysk", -1)

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="FakeBank"):
            _ledger().try_use("FakeBank", 100)

    def test_can_use(self) -> None:
        ledger = _ledger()
        assert ledger.can_use("PUNKTY", 10000)
        assert not ledger.can_use("PUNKTY", 10001)


class TestRelease:
    def test_release_restores(self) -> None:
        ledger = _ledger()
        ledger.try_use("mZysk", 4250)
        ledger.release("mZysk", 4250)
        assert ledger.remaining("mZysk") == 18000

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            _ledger().release("mZysk", -5)

    def test_release_above_limit_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="exceed limit"):
            _ledger().release("mZysk", 1)

    def test_round_trip_has_no_drift(self) -> None:
        ledger = _ledger()
        before = ledger.snapshot()
        amounts = [1, 333, 1505, 4275, 9999, 1]
        for _ in range(1000):
            for amount in amounts:
                assert ledger.try_use("mZysk", amount)
            for amount in reversed(amounts):
                ledger.release("mZysk", amount)
        assert ledger.snapshot() == before

    def test_nested_uses_released_in_reverse(self) -> None:
        ledger = _ledger()
        assert ledger.try_use("mZysk", 9000)
        assert ledger.try_use("mZysk", 9000)
        assert ledger.try_use("mZysk", 1) is False
        ledger.release("mZysk", 9000)
        ledger.release("mZysk", 9000)
        assert ledger.remaining("mZysk") == 18000


class TestHolding:
    def test_held_inside_released_after(self) -> None:
        ledger = _ledger()
        with ledger.holding([("PUNKTY", 1000), ("mZysk", 8000)]) as held:
            assert held is True
            assert ledger.remaining("PUNKTY") == 9000
            assert ledger.remaining("mZysk") == 10000
        assert ledger.snapshot() == {"PUNKTY": 10000, "mZysk": 18000}

    def test_partial_failure_rolls_back(self) -> None:
        ledger = _ledger()
        with ledger.holding([("PUNKTY", 1000), ("mZysk", 18001)]) as held:
            assert held is False
            assert ledger.remaining("PUNKTY") == 10000
        assert ledger.snapshot() == {"PUNKTY": 10000, "mZysk": 18000}

    def test_released_on_exception(self) -> None:
        ledger = _ledger()
        with pytest.raises(RuntimeError):
            with ledger.holding([("PUNKTY", 5000)]) as held:
                assert held
                raise RuntimeError("boom")
        assert ledger.remaining("PUNKTY") == 10000

    def test_nested_holds(self) -> None:
        ledger = _ledger()
        with ledger.holding([("mZysk", 10000)]) as outer:
            assert outer
            with ledger.holding([("mZysk", 9000)]) as inner:
                assert inner is False
            with ledger.holding([("mZysk", 8000)]) as inner:
                assert inner
                assert ledger.remaining("mZysk") == 0
            assert ledger.remaining("mZysk") == 8000
        assert ledger.remaining("mZysk") == 18000

    def test_unknown_method_in_hold_rolls_back_and_raises(self) -> None:
        ledger = _ledger()
        with pytest.raises(InvalidArgumentError):
            with ledger.holding([("PUNKTY", 1000), ("FakeBank", 1)]):
                pass
        assert ledger.remaining("PUNKTY") == 10000
