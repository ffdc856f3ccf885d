# src/po_payment/application/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.po_common.cents import to_cents
from src.po_payment.domain.models import Order, PaymentMethod

_CENT = Decimal("0.01")


def _check_amount(v: Decimal) -> Decimal:
    if not v.is_finite():
        raise ValueError("amount must be a finite number")
    if v < 0:
        raise ValueError("amount must be non-negative")
    if v != v.quantize(_CENT):
        raise ValueError("amount must have at most 2 fractional digits")
    return v


def _check_id(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("id must not be blank")
    return v


class OrderIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    value: Decimal
    promotions: list[str] | None = None

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        return _check_id(v)

    @field_validator("value")
    @classmethod
    def value_is_amount(cls, v: Decimal) -> Decimal:
        return _check_amount(v)

    @field_validator("promotions")
    @classmethod
    def no_blank_promotions(cls, v: list[str] | None) -> list[str] | None:
        if v is not None:
            for promo in v:
                _check_id(promo)
        return v

    def to_domain(self) -> Order:
        return Order(id=self.id, value=to_cents(self.value), promotions=tuple(self.promotions or ()))


class PaymentMethodIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    discount: int = Field(ge=0, le=100)
    limit: Decimal

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        return _check_id(v)

    @field_validator("limit")
    @classmethod
    def limit_is_amount(cls, v: Decimal) -> Decimal:
        return _check_amount(v)

    def to_domain(self) -> PaymentMethod:
        return PaymentMethod(id=self.id, discount=self.discount, limit=to_cents(self.limit))


class OptimizeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    orders: list[OrderIn]
    payment_methods: list[PaymentMethodIn] = Field(alias="paymentMethods")


class AssignmentResponse(BaseModel):
    order_id: str
    strategy: str
    method_id: str | None
    points_amount: str
    traditional_amount: str
    discount: str


class OptimizeResponse(BaseModel):
    solved: bool
    total_discount: str
    total_points: str
    totals: dict[str, str]
    assignments: list[AssignmentResponse]
