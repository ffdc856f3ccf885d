"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Input data (loading, validation, request limits)
  2xxx: Payment contract violations (ledger / discount rules)

"No complete assignment" is a normal search outcome, not an error, and has
no exception class.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Input data ---

class DataValidationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Data validation failed: {detail}", 422)


class TooManyOrdersError(AppError):
    def __init__(self, count: int, maximum: int) -> None:
        super().__init__(
            1002,
            f"Too many orders: got {count}, at most {maximum} can be optimized at once",
            422,
        )


class DataLoadError(AppError):
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(1003, f"Cannot load {path}: {detail}", 400)


# --- 2xxx: Payment contract ---

class InvalidArgumentError(AppError):
    """A negative amount, an unknown method, or points above the order value."""

    def __init__(
        self,
        detail: str,
        order_id: str | None = None,
        method_id: str | None = None,
    ) -> None:
        self.order_id = order_id
        self.method_id = method_id
        super().__init__(2001, f"Invalid argument{_attribution(order_id, method_id)}: {detail}", 500)


class InvalidOperationError(AppError):
    """Traditional-only discount rule evaluated for the points method."""

    def __init__(self, detail: str, order_id: str | None = None, method_id: str | None = None) -> None:
        self.order_id = order_id
        self.method_id = method_id
        super().__init__(2002, f"Invalid operation{_attribution(order_id, method_id)}: {detail}", 500)


def _attribution(order_id: str | None, method_id: str | None) -> str:
    parts = []
    if order_id is not None:
        parts.append(f"order={order_id}")
    if method_id is not None:
        parts.append(f"method={method_id}")
    return f" [{', '.join(parts)}]" if parts else ""
