"""
Audit sink
"""

from typing import Optional, Dict, Any, List
from nodues.models import db, AuditLog
from nodues.utils.helpers import log_error

CREATE_REQUEST = 'CREATE_REQUEST'
VERIFY_REQUEST = 'VERIFY_REQUEST'
APPROVE_DEPARTMENT = 'APPROVE_DEPARTMENT'
REJECT_DEPARTMENT = 'REJECT_DEPARTMENT'
GENERATE_CERTIFICATE = 'GENERATE_CERTIFICATE'


class AuditService:
    """Fire-and-forget audit logging"""

    @staticmethod
    def record(actor_id: Optional[int], action: str, target_id: Any,
               details: Optional[Dict[str, Any]] = None,
               target_type: str = 'ClearanceRequest') -> Optional[AuditLog]:
        """
        Record an audit event

        Failures are logged and discarded so they never block the
        primary operation.

        Args:
            actor_id: Acting student or staff id
            action: Event name, e.g. CREATE_REQUEST
            target_id: Id of the affected record
            details: Extra JSON-serializable context
            target_type: Kind of the affected record

        Returns:
            The stored AuditLog, or None if recording failed
        """
        try:
            entry = AuditLog(
                actor_id=actor_id,
                action=action,
                target_type=target_type,
                target_id=str(target_id) if target_id is not None else None,
                details=details or {},
            )
            db.session.add(entry)
            db.session.commit()
            return entry
        except Exception as e:
            db.session.rollback()
            log_error(f"Audit record failed for {action}", e)
            return None

    @staticmethod
    def list_events(action: Optional[str] = None, page: int = 1, page_size: int = 50) -> Dict[str, Any]:
        """Newest-first page of audit events"""
        query = AuditLog.query
        if action:
            query = query.filter_by(action=action)

        total = query.count()
        items: List[AuditLog] = query.order_by(AuditLog.created_at.desc(), AuditLog.id.desc()) \
            .offset((page - 1) * page_size).limit(page_size).all()

        return {'items': items, 'total': total}
