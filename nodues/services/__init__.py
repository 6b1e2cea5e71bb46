"""
Services package initialization
"""

from nodues.services.aggregator import aggregate_status, is_eligible_for_certificate
from nodues.services.audit_service import AuditService
from nodues.services.certificate_service import CertificateService
from nodues.services.clearance_service import ClearanceService, RequestPage
from nodues.services.department_registry import DepartmentRegistry
from nodues.services.email_service import EmailService
from nodues.services.notification_service import NotificationService
from nodues.services.policy import can_actor_write, can_staff_write, normalize_role

__all__ = [
    'aggregate_status', 'is_eligible_for_certificate', 'AuditService', 'CertificateService',
    'ClearanceService', 'RequestPage', 'DepartmentRegistry', 'EmailService',
    'NotificationService', 'can_actor_write', 'can_staff_write', 'normalize_role'
]
