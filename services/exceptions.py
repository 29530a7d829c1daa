"""
Zero Waste Chef Service Errors
Domain exceptions raised by services and translated to HTTP statuses by the API layer
"""


class ServiceError(Exception):
    """Base class for expected, client-facing failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(ServiceError):
    """Custom authentication error"""
    pass


class DuplicateIdentityError(AuthenticationError):
    """Username or email is already registered"""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Unknown user or wrong password; deliberately indistinguishable"""
    pass


class MissingTokenError(AuthenticationError):
    """No bearer token on the request"""
    pass


class InvalidTokenError(AuthenticationError):
    """Malformed, tampered, expired or wrong-type token"""
    pass


class AuthorizationError(ServiceError):
    """Custom authorization error"""
    pass


class ForbiddenRoleError(AuthorizationError):
    """Authenticated, but the stored role does not allow the operation"""
    pass


class NotFoundError(ServiceError):
    """Referenced record does not exist"""
    pass


class ValidationError(ServiceError):
    """Request content rejected by a service-level check"""
    pass
