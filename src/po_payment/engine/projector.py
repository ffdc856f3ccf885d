"""Collapse a search result into per-method spend totals."""
from collections.abc import Iterable

from src.po_common.cents import format_cents
from src.po_payment.domain.models import POINTS_METHOD_ID, AllocationResult


def project_totals(
    result: AllocationResult,
    method_ids: Iterable[str],
    points_method_id: str = POINTS_METHOD_ID,
) -> dict[str, int]:
    """Return {method_id: cents spent}; empty when no complete assignment exists.

    Every known method appears, with 0 when nothing was spent through it.
    """
    if result.assignments is None:
        return {}
    totals = {method_id: 0 for method_id in method_ids}
    for assignment in result.assignments:
        if assignment.uses_points:
            totals[points_method_id] = totals.get(points_method_id, 0) + assignment.points_amount
        if assignment.method_id is not None and assignment.traditional_amount > 0:
            totals[assignment.method_id] = (
                totals.get(assignment.method_id, 0) + assignment.traditional_amount
            )
    return totals


def format_totals(totals: dict[str, int], skip_zero: bool = False) -> dict[str, str]:
    """{'mZysk': 16500} -> {'mZysk': '165.00'}."""
    return {
        method_id: format_cents(cents)
        for method_id, cents in totals.items()
        if cents > 0 or not skip_zero
    }
