"""
Authorization policy for department decisions

Evaluated by callers before ClearanceService.set_department_status, which
trusts its caller.
"""

from typing import Optional
from nodues.models.user import ROLE_STUDENT, ROLE_FACULTY, ROLE_ADMIN

_ROLES = (ROLE_STUDENT, ROLE_FACULTY, ROLE_ADMIN)


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Upper-case a role string, returning None for unknown roles"""
    if not role:
        return None
    normalized = role.strip().upper()
    return normalized if normalized in _ROLES else None


def can_actor_write(actor_role: Optional[str], actor_department: Optional[str], department_key: str) -> bool:
    """
    Decide whether an actor may record a decision for a department

    Args:
        actor_role: STUDENT, FACULTY or ADMIN (any case)
        actor_department: Department key the actor signs for
        department_key: Department entry being written

    Returns:
        True if the write is allowed
    """
    role = normalize_role(actor_role)

    if role == ROLE_ADMIN:
        return True

    if role == ROLE_FACULTY:
        if not actor_department or not department_key:
            return False
        return actor_department.strip().lower() == department_key.strip().lower()

    return False


def can_staff_write(staff, department_key: str) -> bool:
    """Apply can_actor_write to an active Staff row"""
    if staff is None or not staff.is_active:
        return False
    return can_actor_write(staff.role, staff.department, department_key)
