"""Hintline exception hierarchy.

Every error that may cross the API boundary carries a stable ``code`` and the
HTTP status it maps to, so callers can branch on the kind of failure without
seeing store internals.
"""


class HintlineError(Exception):
    """Base exception for all Hintline errors."""

    status_code = 500

    def __init__(self, message: str = "", code: str = "HINTLINE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(HintlineError):
    """Raised when a required field is missing or malformed."""

    status_code = 400

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(HintlineError):
    """Raised when a referenced user or hint does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message, code="NOT_FOUND")


class ForbiddenError(HintlineError):
    """Raised when a role, ownership or business precondition check fails."""

    status_code = 403

    def __init__(self, message: str = "Access denied."):
        super().__init__(message, code="FORBIDDEN")


class UnauthenticatedError(HintlineError):
    """Raised when the credential is missing, malformed or expired."""

    status_code = 401

    def __init__(self, message: str = "Authentication token missing or invalid."):
        super().__init__(message, code="UNAUTHENTICATED")
