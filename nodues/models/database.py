"""
Database initialization and connection utilities
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text

db = SQLAlchemy()


def init_db() -> None:
    """Initialize database tables and structures"""
    db.create_all()


def check_connection() -> bool:
    """Run a trivial query against the configured database"""
    db.session.execute(text('SELECT 1'))
    return True
