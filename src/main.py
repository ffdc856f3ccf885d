"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.po_common.errors import AppError
from src.po_common.logging_config import configure_logging
from src.po_common.request_log import RequestLogMiddleware
from src.po_common.response import error_response
from src.po_payment.api.router import router as payment_router

VERSION = "0.1.0"

configure_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("AppError %d: %s", exc.code, exc.message)
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(payment_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": VERSION}
