"""
Utilities package initialization
"""

from nodues.utils.exceptions import (
    NoDuesException, ValidationError, StudentNotFound, DuplicateActiveRequest,
    RequestNotFound, UnknownDepartment, RequestNotVerified, InvalidVerificationToken,
    NoActiveDepartments, CertificateNotEligible, CertificateNotFound,
    PersistenceFailure, EmailError
)
from nodues.utils.validators import (
    validate_required, validate_string_length, validate_choice, validate_positive_int
)
from nodues.utils.helpers import (
    setup_logging, log_error, log_warning, log_info, create_response
)

__all__ = [
    'NoDuesException', 'ValidationError', 'StudentNotFound', 'DuplicateActiveRequest',
    'RequestNotFound', 'UnknownDepartment', 'RequestNotVerified', 'InvalidVerificationToken',
    'NoActiveDepartments', 'CertificateNotEligible', 'CertificateNotFound',
    'PersistenceFailure', 'EmailError',
    'validate_required', 'validate_string_length', 'validate_choice', 'validate_positive_int',
    'setup_logging', 'log_error', 'log_warning', 'log_info', 'create_response'
]
