"""
No-Dues certificate model
"""

from datetime import datetime
from nodues.models.database import db


class Certificate(db.Model):
    """Certificate issued for an approved clearance request"""
    __tablename__ = 'certificates'

    id = db.Column(db.Integer, primary_key=True)
    certificate_id = db.Column(db.String(40), unique=True, nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False, index=True)
    request_id = db.Column(db.Integer, db.ForeignKey('clearance_requests.id'), unique=True, nullable=False)
    issued_by = db.Column(db.Integer, nullable=False)
    issued_at = db.Column(db.DateTime, default=datetime.utcnow)
    pdf_path = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'certificate_id': self.certificate_id,
            'student_id': self.student_id,
            'request_id': self.request_id,
            'issued_by': self.issued_by,
            'issued_at': self.issued_at.isoformat() if self.issued_at else None,
            'pdf_path': self.pdf_path
        }
