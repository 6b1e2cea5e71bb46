"""
User models for the No-Dues application
"""

from datetime import datetime
from nodues.models.database import db

ROLE_STUDENT = 'STUDENT'
ROLE_FACULTY = 'FACULTY'
ROLE_ADMIN = 'ADMIN'
STAFF_ROLES = (ROLE_FACULTY, ROLE_ADMIN)


class Student(db.Model):
    """Student model"""
    __tablename__ = 'students'

    id = db.Column(db.Integer, primary_key=True)
    enrollment_no = db.Column(db.String(32), unique=True, nullable=False)
    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    program = db.Column(db.String(100), nullable=True)
    batch = db.Column(db.String(20), nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    clearance_requests = db.relationship('ClearanceRequest', backref='student', lazy=True)
    notifications = db.relationship('Notification', backref='student', lazy=True)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'enrollment_no': self.enrollment_no,
            'full_name': self.full_name,
            'email': self.email,
            'program': self.program,
            'batch': self.batch,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }


class Staff(db.Model):
    """Faculty or admin acting on clearance requests"""
    __tablename__ = 'staff'

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    role = db.Column(db.Enum(*STAFF_ROLES, name='staff_role'), nullable=False, default=ROLE_FACULTY)
    # Department key the faculty member signs for; NULL for admins
    department = db.Column(db.String(50), nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'full_name': self.full_name,
            'email': self.email,
            'role': self.role,
            'department': self.department,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
