from typing import Any, Dict, Optional


class StorageMgmtException(Exception):
    """Base exception for the storage management package."""

    def __init__(self, message: str, error_code: str = None, details: Dict = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ConfigurationException(StorageMgmtException):
    """Raised when configuration is invalid."""
    pass


class ValidationException(StorageMgmtException):
    """Raised when input validation fails."""
    pass


class AuthorizationError(StorageMgmtException):
    """Raised when an authenticated management client cannot be built.

    ``response`` is only set by operations that report a response even on
    failure (blob container deletion); it is ``None`` otherwise.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "AUTHORIZATION_FAILED",
        details: Dict = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.response = response


class RemoteOperationError(StorageMgmtException):
    """Raised when the management service rejects or fails a request.

    The SDK exception is kept unchanged in ``error``.
    """

    def __init__(self, message: str, error: Exception = None, error_code: str = None, details: Dict = None):
        if error_code is None and error is not None:
            # HttpResponseError parses the ARM error body into ``error.code``
            error_code = getattr(getattr(error, "error", None), "code", None)
        super().__init__(message, error_code=error_code, details=details)
        self.error = error

    @classmethod
    def from_sdk_error(cls, error: Exception) -> "RemoteOperationError":
        return cls(str(error), error=error, details={"original_exception": type(error).__name__})

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.error, "status_code", None)


class CancellationError(StorageMgmtException):
    """Raised when an operation exceeds the caller's deadline."""
    pass
