"""
Clearance request models
"""

from datetime import datetime
from nodues.models.database import db

STATUS_PENDING = 'PENDING'
STATUS_APPROVED = 'APPROVED'
STATUS_REJECTED = 'REJECTED'
STATUSES = (STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED)
DECISIONS = (STATUS_APPROVED, STATUS_REJECTED)


class ClearanceRequest(db.Model):
    """No-Dues clearance request, one row per submission"""
    __tablename__ = 'clearance_requests'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False, index=True)
    overall_status = db.Column(db.Enum(*STATUSES, name='overall_status'),
                               nullable=False, default=STATUS_PENDING, index=True)
    remarks = db.Column(db.Text, nullable=False, default='')
    verified = db.Column(db.Boolean, nullable=False, default=False)
    verification_token = db.Column(db.String(64), nullable=True, unique=True)
    verification_expires_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    departments = db.relationship('DepartmentClearance', backref='request', lazy=True,
                                  order_by='DepartmentClearance.position')

    @property
    def department_statuses(self):
        """Department key -> DepartmentClearance, in creation order"""
        return {entry.department_key: entry for entry in self.departments}

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'student_id': self.student_id,
            'overall_status': self.overall_status,
            'remarks': self.remarks,
            'verified': self.verified,
            'department_statuses': {
                key: entry.to_dict() for key, entry in self.department_statuses.items()
            },
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
            'student_name': self.student.full_name if self.student else None
        }


class DepartmentClearance(db.Model):
    """One department's decision on one clearance request"""
    __tablename__ = 'department_clearances'
    __table_args__ = (
        db.UniqueConstraint('request_id', 'department_key', name='uq_request_department'),
    )

    id = db.Column(db.Integer, primary_key=True)
    request_id = db.Column(db.Integer, db.ForeignKey('clearance_requests.id'), nullable=False, index=True)
    department_key = db.Column(db.String(50), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.Enum(*STATUSES, name='department_status'),
                       nullable=False, default=STATUS_PENDING)
    remarks = db.Column(db.Text, nullable=False, default='')
    updated_by = db.Column(db.Integer, nullable=True)
    updated_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'status': self.status,
            'remarks': self.remarks,
            'updated_by': self.updated_by,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }


class Notification(db.Model):
    """Notification model"""
    __tablename__ = 'notifications'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False)
    actor_name = db.Column(db.String(200), nullable=False)
    action = db.Column(db.String(100), nullable=False)
    phase = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'student_id': self.student_id,
            'actor_name': self.actor_name,
            'action': self.action,
            'phase': self.phase,
            'message': self.message,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
