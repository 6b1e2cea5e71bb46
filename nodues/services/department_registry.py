"""
Department registry service
"""

from typing import List, Iterable
from sqlalchemy.exc import SQLAlchemyError
from nodues.models import db, Department
from nodues.utils.exceptions import ValidationError, PersistenceFailure
from nodues.utils.helpers import log_info, log_error


class DepartmentRegistry:
    """Source of the department keys a new request must clear"""

    @staticmethod
    def list_active_department_keys() -> List[str]:
        """Active department keys in display order"""
        rows = Department.query.filter_by(is_active=True) \
            .order_by(Department.position, Department.id).all()
        return [row.key for row in rows]

    @staticmethod
    def list_departments() -> List[Department]:
        """All departments, active or not"""
        return Department.query.order_by(Department.position, Department.id).all()

    @staticmethod
    def seed_departments(keys: Iterable[str]) -> int:
        """
        Create any configured department that does not exist yet

        Args:
            keys: Department keys, in display order

        Returns:
            Number of departments created
        """
        created = 0
        try:
            existing = {row.key for row in Department.query.all()}
            for position, key in enumerate(keys):
                key = key.strip().lower()
                if not key or key in existing:
                    continue
                db.session.add(Department(
                    key=key,
                    name=key.replace('_', ' ').title(),
                    position=position,
                ))
                existing.add(key)
                created += 1
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Department seeding failed", e)
            raise PersistenceFailure("Could not seed departments") from e

        if created:
            log_info(f"Seeded {created} clearance departments")
        return created

    @staticmethod
    def set_active(key: str, active: bool) -> Department:
        """Activate or deactivate a department for future requests"""
        department = Department.query.filter_by(key=key.strip().lower()).first()
        if not department:
            raise ValidationError(f"Unknown department: {key}")

        try:
            department.is_active = active
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Department update failed", e)
            raise PersistenceFailure("Could not update department") from e

        log_info(f"Department {department.key} {'activated' if active else 'deactivated'}")
        return department
