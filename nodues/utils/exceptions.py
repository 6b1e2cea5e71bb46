"""
Custom exceptions for the No-Dues application
"""


class NoDuesException(Exception):
    """Base exception for the No-Dues application"""
    status_code = 500


class ValidationError(NoDuesException):
    """Validation error"""
    status_code = 400


class StudentNotFound(NoDuesException):
    """Referenced student does not exist"""
    status_code = 404


class DuplicateActiveRequest(NoDuesException):
    """Student already has a pending clearance request"""
    status_code = 409

    def __init__(self, message: str, existing_request_id: int = None):
        super().__init__(message)
        self.existing_request_id = existing_request_id


class RequestNotFound(NoDuesException):
    """Unknown clearance request id"""
    status_code = 404


class UnknownDepartment(NoDuesException):
    """Department key is not part of the request's department set"""
    status_code = 400


class RequestNotVerified(NoDuesException):
    """Request has not been verified by the student yet"""
    status_code = 400


class InvalidVerificationToken(NoDuesException):
    """Verification token is unknown or expired"""
    status_code = 400


class NoActiveDepartments(NoDuesException):
    """No department is active, so a request cannot be seeded"""
    status_code = 500


class CertificateNotEligible(NoDuesException):
    """Request is not approved"""
    status_code = 400


class CertificateNotFound(NoDuesException):
    """Unknown certificate id"""
    status_code = 404


class PersistenceFailure(NoDuesException):
    """Storage layer error"""
    status_code = 500


class EmailError(NoDuesException):
    """Email service error"""
    status_code = 500
