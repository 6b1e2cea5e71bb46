"""
Database models initialization
"""

from nodues.models.database import db
from nodues.models.user import Student, Staff
from nodues.models.clearance import ClearanceRequest, DepartmentClearance, Notification
from nodues.models.department import Department
from nodues.models.audit import AuditLog
from nodues.models.certificate import Certificate

# Export all models
__all__ = [
    'db', 'Student', 'Staff', 'ClearanceRequest', 'DepartmentClearance',
    'Notification', 'Department', 'AuditLog', 'Certificate'
]
