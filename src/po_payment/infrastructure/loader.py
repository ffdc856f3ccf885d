"""JSON file loading for orders and payment methods.

Files hold a JSON array, e.g. orders.json:
    [{"id": "ORDER1", "value": "100.00", "promotions": ["mZysk"]}]
and paymentmethods.json:
    [{"id": "PUNKTY", "discount": "15", "limit": "100.00"}]
"""
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from src.po_common.errors import DataLoadError
from src.po_payment.application.schemas import OrderIn, PaymentMethodIn

logger = logging.getLogger(__name__)

_ORDERS = TypeAdapter(list[OrderIn])
_METHODS = TypeAdapter(list[PaymentMethodIn])


def _read(path: str | Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise DataLoadError(str(path), exc.strerror or str(exc)) from exc


def load_orders(path: str | Path) -> list[OrderIn]:
    try:
        orders = _ORDERS.validate_json(_read(path))
    except ValidationError as exc:
        raise DataLoadError(str(path), _summarize(exc)) from exc
    logger.info("Loaded %d orders from %s", len(orders), path)
    return orders


def load_payment_methods(path: str | Path) -> list[PaymentMethodIn]:
    try:
        methods = _METHODS.validate_json(_read(path))
    except ValidationError as exc:
        raise DataLoadError(str(path), _summarize(exc)) from exc
    logger.info("Loaded %d payment methods from %s", len(methods), path)
    return methods


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first["loc"])
    more = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{where}: {first['msg']}{more}" if where else f"{first['msg']}{more}"
