"""
No-Dues Application Factory
Student clearance workflow on Flask and SQLAlchemy
"""

import os
from flask import Flask, jsonify
from nodues.models import db
from nodues.models.database import init_db
from nodues.services.department_registry import DepartmentRegistry
from nodues.utils import NoDuesException, setup_logging, log_info, log_warning, log_error, create_response


def create_app(config_name: str = None) -> Flask:
    """
    Application factory

    Args:
        config_name: Configuration name (development, production, testing)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Import and set configuration
    from config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)
    config_class.init_app(app)

    # Initialize extensions
    db.init_app(app)

    # Setup logging
    with app.app_context():
        setup_logging()
        log_info("Application initialized")

    register_error_handlers(app)

    # Create database tables and seed the department registry
    with app.app_context():
        init_db()
        log_info("Database tables created successfully")
        DepartmentRegistry.seed_departments(app.config.get('CLEARANCE_DEPARTMENTS', []))

    return app


def register_error_handlers(app: Flask) -> None:
    """Render NoDuesException subclasses as JSON for any route layer"""

    @app.errorhandler(NoDuesException)
    def handle_nodues_exception(error):
        if error.status_code >= 500:
            log_error(f"{type(error).__name__}: {error}")
        else:
            log_warning(f"{type(error).__name__}: {error}")

        data = {'error': type(error).__name__}
        existing_request_id = getattr(error, 'existing_request_id', None)
        if existing_request_id is not None:
            data['existing_request_id'] = existing_request_id

        return jsonify(create_response(False, str(error), data)), error.status_code
