from typing import Any, Optional

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ConfigurationError(BaseAppException):
    """Raised when the TMDB connection settings are unusable"""
    def __init__(self, message: str = "TMDB configuration is incomplete"):
        super().__init__(message)

class TMDBError(BaseAppException):
    """Raised when a request never completed (connection, timeout, DNS, malformed response)"""
    def __init__(self, message: str, method: Optional[str] = None, endpoint: Optional[str] = None,
                 duration: Optional[float] = None):
        self.method = method
        self.endpoint = endpoint
        self.duration = duration
        super().__init__(message)

    def to_dict(self):
        """Return error as dictionary"""
        return {
            "error_code": "TRANSPORT_FAILURE",
            "message": self.message,
            "method": self.method,
            "endpoint": self.endpoint,
            "duration": self.duration,
        }

_MISSING = object()

class ContractViolation(AssertionError):
    """Raised when a response body breaks an expected shape contract.

    Subclasses AssertionError so pytest reports it as a test failure rather
    than an error.
    """
    def __init__(self, field: str, expectation: str, actual: Any = _MISSING):
        self.field = field
        self.expectation = expectation
        self.actual = actual
        message = f"{field}: expected {expectation}"
        if actual is not _MISSING:
            message += f", got {actual!r}"
        super().__init__(message)

    def to_dict(self):
        """Return violation as dictionary"""
        return {
            "error_code": "CONTRACT_VIOLATION",
            "field": self.field,
            "expectation": self.expectation,
            "actual": None if self.actual is _MISSING else self.actual,
        }
