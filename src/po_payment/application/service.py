"""PaymentOptimizationService: validated input in, optimization report out."""

from config.settings import settings
from src.po_common.cents import format_cents
from src.po_common.errors import TooManyOrdersError
from src.po_payment.application.schemas import (
    AssignmentResponse,
    OptimizeRequest,
    OptimizeResponse,
)
from src.po_payment.application.validation import validate_batch
from src.po_payment.domain.models import AllocationResult
from src.po_payment.engine.allocator import PaymentAllocator
from src.po_payment.engine.observer import LoggingSearchObserver, SearchObserver
from src.po_payment.engine.projector import format_totals, project_totals


class PaymentOptimizationService:
    def __init__(
        self,
        points_method_id: str | None = None,
        max_orders: int | None = None,
        observer: SearchObserver | None = None,
    ) -> None:
        self._points_method_id = points_method_id or settings.POINTS_METHOD_ID
        self._max_orders = max_orders if max_orders is not None else settings.MAX_ORDERS
        self._observer = observer or LoggingSearchObserver()

    def optimize(self, request: OptimizeRequest) -> OptimizeResponse:
        validate_batch(request.orders, request.payment_methods, self._points_method_id)
        if self._max_orders and len(request.orders) > self._max_orders:
            raise TooManyOrdersError(len(request.orders), self._max_orders)

        orders = [o.to_domain() for o in request.orders]
        methods = [m.to_domain() for m in request.payment_methods]
        allocator = PaymentAllocator(
            orders, methods, points_method_id=self._points_method_id, observer=self._observer
        )
        result = allocator.allocate()
        totals = project_totals(result, [m.id for m in methods], self._points_method_id)
        return self._to_response(result, totals)

    @staticmethod
    def _to_response(result: AllocationResult, totals: dict[str, int]) -> OptimizeResponse:
        assignments = [
            AssignmentResponse(
                order_id=a.order_id,
                strategy=a.strategy.value,
                method_id=a.method_id,
                points_amount=format_cents(a.points_amount),
                traditional_amount=format_cents(a.traditional_amount),
                discount=format_cents(a.discount),
            )
            for a in result.assignments or ()
        ]
        return OptimizeResponse(
            solved=result.found,
            total_discount=format_cents(result.total_discount),
            total_points=format_cents(result.total_points),
            totals=format_totals(totals),
            assignments=assignments,
        )
