"""
Overall status aggregation and certificate readiness
"""

from typing import Iterable
from nodues.models.clearance import STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED


def aggregate_status(statuses: Iterable[str]) -> str:
    """
    Derive a request's overall status from its department statuses

    Any REJECTED wins, then all APPROVED, otherwise PENDING. An empty
    department set is vacuously APPROVED.

    Args:
        statuses: Department status values, in department order

    Returns:
        One of PENDING, APPROVED, REJECTED
    """
    collected = list(statuses)

    if any(status == STATUS_REJECTED for status in collected):
        return STATUS_REJECTED

    if all(status == STATUS_APPROVED for status in collected):
        return STATUS_APPROVED

    return STATUS_PENDING


def request_status(request) -> str:
    """Aggregate the department entries of a ClearanceRequest"""
    return aggregate_status(entry.status for entry in request.departments)


def is_eligible_for_certificate(request) -> bool:
    """A certificate may only be issued for an APPROVED request"""
    return request.overall_status == STATUS_APPROVED and request_status(request) == STATUS_APPROVED
