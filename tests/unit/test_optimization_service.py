import pytest

from src.po_common.errors import DataValidationError, TooManyOrdersError
from src.po_payment.application.schemas import OptimizeRequest
from src.po_payment.application.service import PaymentOptimizationService

_METHODS = [
    {"id": "PUNKTY", "discount": "15", "limit": "100.00"},
    {"id": "mZysk", "discount": "10", "limit": "180.00"},
    {"id": "BosBankrut", "discount": "5", "limit": "200.00"},
]
_ORDERS = [
    {"id": "ORDER1", "value": "100.00", "promotions": ["mZysk"]},
    {"id": "ORDER2", "value": "200.00", "promotions": ["BosBankrut"]},
    {"id": "ORDER3", "value": "150.00", "promotions": ["mZysk", "BosBankrut"]},
    {"id": "ORDER4", "value": "50.00"},
]


def _request(orders: list[dict], methods: list[dict] = _METHODS) -> OptimizeRequest:
    return OptimizeRequest.model_validate({"orders": orders, "paymentMethods": methods})


class TestPaymentOptimizationService:
    def test_example_report(self) -> None:
        report = PaymentOptimizationService().optimize(_request(_ORDERS))
        assert report.solved is True
        assert report.total_discount == "52.50"
        assert report.total_points == "95.00"
        assert report.totals == {"PUNKTY": "95.00", "mZysk": "160.00", "BosBankrut": "200.00"}
        assert len(report.assignments) == 4

    def test_unsolvable_report(self) -> None:
        report = PaymentOptimizationService().optimize(
            _request([{"id": "LARGE_ORDER", "value": "10000.00"}])
        )
        assert report.solved is False
        assert report.totals == {}
        assert report.assignments == []
        assert report.total_discount == "0.00"

    def test_zero_discount_success_is_solved(self) -> None:
        report = PaymentOptimizationService().optimize(_request(
            [{"id": "ORDER", "value": "50.00"}],
            [{"id": "PUNKTY", "discount": 15, "limit": "0.00"},
             {"id": "Card", "discount": 10, "limit": "100.00"}],
        ))
        assert report.solved is True
        assert report.total_discount == "0.00"
        assert report.totals == {"PUNKTY": "0.00", "Card": "50.00"}

    def test_rejects_unknown_promotion(self) -> None:
        with pytest.raises(DataValidationError):
            PaymentOptimizationService().optimize(
                _request([{"id": "O", "value": "1.00", "promotions": ["FakeBank"]}])
            )

    def test_rejects_too_many_orders(self) -> None:
        orders = [{"id": f"O{i}", "value": "1.00"} for i in range(3)]
        with pytest.raises(TooManyOrdersError):
            PaymentOptimizationService(max_orders=2).optimize(_request(orders))

    def test_zero_max_orders_disables_cap(self) -> None:
        orders = [{"id": f"O{i}", "value": "1.00"} for i in range(3)]
        report = PaymentOptimizationService(max_orders=0).optimize(_request(orders))
        assert report.solved
        assert report.totals["PUNKTY"] == "3.00"

    def test_custom_points_id(self) -> None:
        report = PaymentOptimizationService(points_method_id="BONUS").optimize(_request(
            [{"id": "O", "value": "100.00"}],
            [{"id": "BONUS", "discount": 20, "limit": "100.00"}],
        ))
        assert report.totals == {"BONUS": "100.00"}
        assert report.total_discount == "20.00"
