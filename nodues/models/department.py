"""
Department registry model
"""

from datetime import datetime
from nodues.models.database import db


class Department(db.Model):
    """A clearance department (library, accounts, hostel, ...)"""
    __tablename__ = 'departments'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'description': self.description,
            'is_active': self.is_active,
            'position': self.position,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
