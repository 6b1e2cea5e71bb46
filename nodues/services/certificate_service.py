"""
Certificate issuance for approved clearance requests
"""

import secrets
import string
import time
from typing import List, Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from nodues.models import db, Certificate, ClearanceRequest
from nodues.services import audit_service
from nodues.services.aggregator import is_eligible_for_certificate
from nodues.services.audit_service import AuditService
from nodues.services.notification_service import NotificationService
from nodues.utils.exceptions import (
    RequestNotFound, CertificateNotEligible, CertificateNotFound, PersistenceFailure
)
from nodues.utils.helpers import log_info, log_error

_BASE36 = string.digits + string.ascii_uppercase


def _to_base36(value: int) -> str:
    if value == 0:
        return '0'
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return ''.join(reversed(digits))


def generate_certificate_id() -> str:
    """ND-<base36 epoch millis>-<6 random base36 chars>"""
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = ''.join(secrets.choice(_BASE36) for _ in range(6))
    return f"ND-{timestamp}-{suffix}"


def _find_certificate(request_id: int) -> Optional[Certificate]:
    return Certificate.query.filter_by(request_id=request_id).first()


class CertificateService:
    """Certificate issuance gated on the request's overall status"""

    @staticmethod
    def issue_certificate(request_id: int, actor_id: int) -> Certificate:
        """
        Issue the No-Dues certificate for an approved request

        Issuing twice for the same request returns the existing certificate.

        Args:
            request_id: Clearance request id
            actor_id: Issuing admin id

        Returns:
            The Certificate

        Raises:
            RequestNotFound: If the request does not exist
            CertificateNotEligible: If the request is not APPROVED
        """
        clearance_request = db.session.get(ClearanceRequest, request_id)
        if not clearance_request:
            raise RequestNotFound(f"Request {request_id} not found")

        if not is_eligible_for_certificate(clearance_request):
            raise CertificateNotEligible(
                f"Request {request_id} is {clearance_request.overall_status}, it must be approved first"
            )

        existing = _find_certificate(request_id)
        if existing:
            return existing

        certificate_id = generate_certificate_id()
        certificate_dir = current_app.config.get('CERTIFICATE_DIR', '/certificates').rstrip('/')

        try:
            certificate = Certificate(
                certificate_id=certificate_id,
                student_id=clearance_request.student_id,
                request_id=request_id,
                issued_by=actor_id,
                pdf_path=f"{certificate_dir}/{certificate_id}.pdf",
            )
            db.session.add(certificate)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            # Unique request_id: another issuer won the race for this request
            existing = _find_certificate(request_id)
            if existing is None:
                log_error("Certificate generation error", e)
                raise PersistenceFailure("Failed to generate certificate") from e
            log_info(f"Certificate for request {request_id} already issued concurrently")
            return existing
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error("Certificate generation error", e)
            raise PersistenceFailure("Failed to generate certificate") from e

        log_info(f"Certificate {certificate_id} issued for request {request_id}")

        AuditService.record(actor_id, audit_service.GENERATE_CERTIFICATE, certificate.id,
                            {'certificate_id': certificate_id, 'request_id': request_id},
                            target_type='Certificate')
        NotificationService.send_certificate_email(certificate)

        return certificate

    @staticmethod
    def verify_certificate(certificate_id: str) -> Certificate:
        certificate = Certificate.query.filter_by(certificate_id=certificate_id).first()
        if not certificate:
            raise CertificateNotFound(f"Certificate {certificate_id} not found")
        return certificate

    @staticmethod
    def list_student_certificates(student_id: int) -> List[Certificate]:
        return Certificate.query.filter_by(student_id=student_id) \
            .order_by(Certificate.issued_at.desc()).all()
