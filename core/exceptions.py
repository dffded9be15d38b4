"""
Custom exceptions for the application.
Following domain-driven design principles with specific exception types.
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when validation fails"""
    default_message = "Validation failed"


class NotFoundError(BaseApplicationException):
    """Raised when a resource is not found"""
    default_message = "Resource not found"

    def __init__(self, resource_type=None, resource_id=None, **kwargs):
        self.resource_type = resource_type
        self.resource_id = resource_id
        if 'message' not in kwargs and resource_type:
            kwargs['message'] = f"{resource_type} #{resource_id} not found"
        super().__init__(**kwargs)


class PermissionDeniedError(BaseApplicationException):
    """Raised when user doesn't have permission"""
    default_message = "Permission denied"


class ConfigurationError(BaseApplicationException):
    """Raised when the system is wired up incorrectly"""
    default_message = "Configuration error"


class AttributionError(ConfigurationError):
    """Raised when a change can't be attributed to an organization"""
    default_message = "No organization could be determined for this change"


class UnderlyingWriteError(BaseApplicationException):
    """
    Raised when a tracked create/update itself fails.
    The original database or validation error is kept on `.original`.
    """
    default_message = "Write failed"

    def __init__(self, original=None, **kwargs):
        self.original = original
        if 'message' not in kwargs and original is not None:
            kwargs['message'] = f"Write failed: {original}"
        super().__init__(**kwargs)


class LogWriteError(BaseApplicationException):
    """
    Raised when an entity write succeeded but its change log entry could not be written.
    Operators must be able to tell this apart from a failed write: it means an audit gap.
    """
    default_message = "Change log entry could not be written"

    def __init__(self, component_type=None, component_id=None, **kwargs):
        self.component_type = component_type
        self.component_id = component_id
        super().__init__(**kwargs)
