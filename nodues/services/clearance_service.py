"""
Clearance request lifecycle and per-department decisions
"""

import math
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, List, Dict, Any
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from nodues.models import db, Student, ClearanceRequest, DepartmentClearance, Certificate
from nodues.models.clearance import (
    STATUSES, DECISIONS, STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED
)
from nodues.services import audit_service
from nodues.services.aggregator import aggregate_status
from nodues.services.audit_service import AuditService
from nodues.services.department_registry import DepartmentRegistry
from nodues.services.notification_service import NotificationService
from nodues.utils.exceptions import (
    StudentNotFound, DuplicateActiveRequest, RequestNotFound, UnknownDepartment,
    RequestNotVerified, InvalidVerificationToken, NoActiveDepartments, PersistenceFailure
)
from nodues.utils.helpers import log_info, log_warning, log_error
from nodues.utils.validators import (
    validate_required, validate_string_length, validate_choice, validate_positive_int
)

MAX_REMARKS_LENGTH = 2000


@dataclass
class RequestPage:
    """One page of clearance requests"""
    items: List[ClearanceRequest]
    total: int
    page: int
    page_size: int
    # Highest request id visible when the first page was read
    snapshot_id: int = 0

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items': [item.to_dict() for item in self.items],
            'pagination': {
                'total': self.total,
                'page': self.page,
                'page_size': self.page_size,
                'pages': self.pages,
                'snapshot_id': self.snapshot_id,
            }
        }


class ClearanceService:
    """Request lifecycle manager and department clearance updater"""

    @staticmethod
    def create_request(student_id: int, remarks: Optional[str] = None) -> ClearanceRequest:
        """
        Submit a new No-Dues request for a student

        Args:
            student_id: Owning student id
            remarks: Optional request-level remarks

        Returns:
            The created ClearanceRequest, every department PENDING

        Raises:
            StudentNotFound: If the student does not exist
            DuplicateActiveRequest: If the student already has a PENDING request
            NoActiveDepartments: If no department is active
        """
        student = db.session.get(Student, student_id)
        if not student:
            raise StudentNotFound(f"Student {student_id} not found")

        if remarks is not None:
            validate_string_length(remarks, min_length=0, max_length=MAX_REMARKS_LENGTH, field_name="Remarks")

        existing = ClearanceRequest.query.filter_by(student_id=student_id, overall_status=STATUS_PENDING) \
            .order_by(ClearanceRequest.created_at.desc(), ClearanceRequest.id.desc()).first()
        if existing:
            raise DuplicateActiveRequest(
                f"Student {student_id} already has an active request (#{existing.id})",
                existing_request_id=existing.id,
            )

        department_keys = DepartmentRegistry.list_active_department_keys()
        if not department_keys:
            raise NoActiveDepartments("No active departments are configured")

        now = datetime.utcnow()
        ttl_hours = current_app.config.get('VERIFICATION_TOKEN_TTL_HOURS', 24)

        try:
            clearance_request = ClearanceRequest(
                student_id=student_id,
                overall_status=STATUS_PENDING,
                remarks=remarks or '',
                verified=False,
                verification_token=secrets.token_hex(32),
                verification_expires_at=now + timedelta(hours=ttl_hours),
                created_at=now,
                updated_at=now,
            )
            db.session.add(clearance_request)
            db.session.flush()

            for position, key in enumerate(department_keys):
                db.session.add(DepartmentClearance(
                    request_id=clearance_request.id,
                    department_key=key,
                    position=position,
                    status=STATUS_PENDING,
                    remarks='',
                ))

            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Create clearance request error", e)
            raise PersistenceFailure("Failed to create clearance request") from e

        log_info(f"Clearance request {clearance_request.id} created for student {student_id} "
                 f"with departments {department_keys}")

        AuditService.record(student_id, audit_service.CREATE_REQUEST, clearance_request.id,
                            {'departments': department_keys})
        NotificationService.send_verification_email(clearance_request)

        return clearance_request

    @staticmethod
    def get_request(request_id: int) -> ClearanceRequest:
        clearance_request = db.session.get(ClearanceRequest, request_id)
        if not clearance_request:
            raise RequestNotFound(f"Request {request_id} not found")
        return clearance_request

    @staticmethod
    def get_active_request(student_id: int) -> Optional[ClearanceRequest]:
        """Most recent request for a student, or None"""
        return ClearanceRequest.query.filter_by(student_id=student_id) \
            .order_by(ClearanceRequest.created_at.desc(), ClearanceRequest.id.desc()).first()

    @staticmethod
    def list_student_requests(student_id: int) -> List[ClearanceRequest]:
        """Request history for a student, newest first"""
        return ClearanceRequest.query.filter_by(student_id=student_id) \
            .order_by(ClearanceRequest.created_at.desc(), ClearanceRequest.id.desc()).all()

    @staticmethod
    def list_requests(status: Optional[str] = None, page: int = 1, page_size: Optional[int] = None,
                      snapshot_id: Optional[int] = None) -> RequestPage:
        """
        Page through requests newest first

        Pass the snapshot_id of the first page back in for later pages so
        requests inserted in between do not shift the listing.

        Args:
            status: Optional overall status filter
            page: 1-based page number
            page_size: Items per page, capped at MAX_PAGE_SIZE
            snapshot_id: Snapshot marker returned with an earlier page

        Returns:
            RequestPage with items and total count
        """
        if page_size is None:
            page_size = current_app.config.get('DEFAULT_PAGE_SIZE', 20)
        validate_positive_int(page, "Page")
        validate_positive_int(page_size, "Page size")
        page_size = min(page_size, current_app.config.get('MAX_PAGE_SIZE', 100))

        query = ClearanceRequest.query
        if status is not None:
            validate_choice(status, STATUSES, "Status")
            query = query.filter_by(overall_status=status)

        if snapshot_id is None:
            snapshot_id = db.session.query(func.max(ClearanceRequest.id)).scalar() or 0
        query = query.filter(ClearanceRequest.id <= snapshot_id)

        total = query.count()
        items = query.order_by(ClearanceRequest.created_at.desc(), ClearanceRequest.id.desc()) \
            .offset((page - 1) * page_size).limit(page_size).all()

        return RequestPage(items=items, total=total, page=page, page_size=page_size, snapshot_id=snapshot_id)

    @staticmethod
    def list_department_requests(department_key: str, status: Optional[str] = None) -> List[ClearanceRequest]:
        """Requests that include a department, optionally filtered by that department's status"""
        department_key = department_key.strip().lower()
        query = ClearanceRequest.query.join(DepartmentClearance) \
            .filter(DepartmentClearance.department_key == department_key)
        if status is not None:
            validate_choice(status, STATUSES, "Status")
            query = query.filter(DepartmentClearance.status == status)

        return query.order_by(ClearanceRequest.created_at.desc(), ClearanceRequest.id.desc()).all()

    @staticmethod
    def verify_request(token: str) -> ClearanceRequest:
        """Confirm a submission from the emailed verification link"""
        validate_required(token, "Verification token")

        clearance_request = ClearanceRequest.query.filter_by(verification_token=token).first()
        if not clearance_request:
            raise InvalidVerificationToken("Invalid or expired token")

        expires_at = clearance_request.verification_expires_at
        if expires_at and expires_at < datetime.utcnow():
            raise InvalidVerificationToken("Invalid or expired token")

        try:
            clearance_request.verified = True
            clearance_request.verification_token = None
            clearance_request.verification_expires_at = None
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Verify clearance request error", e)
            raise PersistenceFailure("Failed to verify clearance request") from e

        AuditService.record(clearance_request.student_id, audit_service.VERIFY_REQUEST, clearance_request.id)
        return clearance_request

    @staticmethod
    def set_department_status(request_id: int, department_key: str, actor_id: int, decision: str,
                              remarks: Optional[str] = None) -> ClearanceRequest:
        """
        Record one department's decision and recompute the overall status

        The caller must already have checked that the actor may write this
        department (see policy.can_actor_write).

        Args:
            request_id: Clearance request id
            department_key: Department entry to overwrite
            actor_id: Acting faculty/admin id
            decision: APPROVED or REJECTED
            remarks: New remarks; previous remarks are kept when None

        Returns:
            The updated ClearanceRequest

        Raises:
            RequestNotFound: If the request does not exist
            UnknownDepartment: If the key is not one of the request's departments
        """
        validate_choice(decision, DECISIONS, "Decision")
        if remarks is not None:
            validate_string_length(remarks, min_length=0, max_length=MAX_REMARKS_LENGTH, field_name="Remarks")

        department_key = department_key.strip().lower()

        # Row lock on the parent serialises recomputation of overall_status per request
        clearance_request = ClearanceRequest.query.filter_by(id=request_id).with_for_update().first()
        if not clearance_request:
            raise RequestNotFound(f"Request {request_id} not found")

        entry = DepartmentClearance.query.filter_by(request_id=request_id, department_key=department_key).first()
        if entry is None:
            log_warning(f"Actor {actor_id} tried to write department '{department_key}' "
                        f"which is not part of request {request_id}")
            raise UnknownDepartment(f"Department '{department_key}' is not part of request {request_id}")

        if current_app.config.get('REQUIRE_REQUEST_VERIFICATION') and not clearance_request.verified:
            raise RequestNotVerified(f"Request {request_id} has not been verified yet")

        previous_overall = clearance_request.overall_status
        now = datetime.utcnow()
        values = {'status': decision, 'updated_by': actor_id, 'updated_at': now}
        if remarks is not None:
            values['remarks'] = remarks

        try:
            # Targeted row update so concurrent decisions on other departments are never overwritten
            DepartmentClearance.query \
                .filter_by(request_id=request_id, department_key=department_key) \
                .update(values, synchronize_session=False)

            statuses = [status for (status,) in db.session.query(DepartmentClearance.status)
                        .filter_by(request_id=request_id)
                        .with_for_update()
                        .order_by(DepartmentClearance.position).all()]
            overall_status = aggregate_status(statuses)

            ClearanceRequest.query.filter_by(id=request_id) \
                .update({'overall_status': overall_status, 'updated_at': now}, synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Set department status error", e)
            raise PersistenceFailure("Failed to update department status") from e

        log_info(f"Request {request_id}: {department_key} -> {decision} by {actor_id}, overall {overall_status}")

        action = audit_service.APPROVE_DEPARTMENT if decision == STATUS_APPROVED else audit_service.REJECT_DEPARTMENT
        AuditService.record(actor_id, action, request_id, {
            'department': department_key,
            'decision': decision,
            'remarks': remarks,
            'overall_status': overall_status,
        })
        NotificationService.notify_department_decision(
            clearance_request, department_key, actor_id, decision, remarks or ''
        )
        if overall_status != previous_overall and overall_status in (STATUS_APPROVED, STATUS_REJECTED):
            NotificationService.send_overall_status_email(clearance_request)

        return clearance_request

    @staticmethod
    def summarize() -> Dict[str, int]:
        """Counts per overall status for the admin dashboard"""
        counts = {status.lower(): 0 for status in STATUSES}
        rows = db.session.query(ClearanceRequest.overall_status, func.count(ClearanceRequest.id)) \
            .group_by(ClearanceRequest.overall_status).all()
        for status, count in rows:
            counts[status.lower()] = count

        counts['total'] = sum(counts.values())
        counts['certificates_issued'] = Certificate.query.count()
        return counts
