"""po_payment REST endpoints.

POST /payments/optimize   — allocate payment methods for a batch of orders
"""

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from src.po_common.response import ApiResponse, success_response
from src.po_payment.application.schemas import OptimizeRequest
from src.po_payment.application.service import PaymentOptimizationService

router = APIRouter(prefix="/payments", tags=["payments"])

_service = PaymentOptimizationService()


@router.post("/optimize")
async def optimize_payments(body: OptimizeRequest, request: Request) -> ApiResponse:
    # CPU-bound search, keep it off the event loop
    result = await run_in_threadpool(_service.optimize, body)
    return success_response(
        result.model_dump(), request_id=getattr(request.state, "request_id", None)
    )
