"""
Typed errors raised by services and the auth dependency chain.

Each error carries an ``ErrorKind``; ``jobboard.main`` renders them as
``{"detail": message, "error": kind}`` with the status from ``STATUS_BY_KIND``.
"""
import enum


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_REVOKED = "token_revoked"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_TRANSITION = "invalid_transition"
    PRECONDITION_FAILED = "precondition_failed"
    UPSTREAM_FAILURE = "upstream_failure"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.INVALID_CREDENTIALS: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.PRECONDITION_FAILED: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.TOKEN_INVALID: 401,
    ErrorKind.TOKEN_EXPIRED: 401,
    ErrorKind.TOKEN_REVOKED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_TRANSITION: 409,
    ErrorKind.UPSTREAM_FAILURE: 500,
}


class AppError(Exception):
    """Base application error."""

    kind = ErrorKind.UPSTREAM_FAILURE
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_body(self) -> dict:
        return {"detail": self.message, "error": self.kind.value}


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid input"


class InvalidCredentialsError(AppError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid email or password"


class TokenError(AppError):
    """Raised by the token service; the auth dependency wraps it in UnauthenticatedError."""


class TokenInvalidError(TokenError):
    kind = ErrorKind.TOKEN_INVALID
    default_message = "Token is not valid"


class TokenExpiredError(TokenError):
    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Token has expired"


class TokenRevokedError(TokenError):
    kind = ErrorKind.TOKEN_REVOKED
    default_message = "Token has been revoked"


class UnauthenticatedError(AppError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "Not authenticated"

    def __init__(self, message: str | None = None, reason: ErrorKind | None = None):
        super().__init__(message)
        self.reason = reason

    def to_body(self) -> dict:
        body = super().to_body()
        if self.reason is not None:
            body["reason"] = self.reason.value
        return body


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access forbidden"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"


class InvalidTransitionError(AppError):
    kind = ErrorKind.INVALID_TRANSITION
    default_message = "Status change not allowed"


class PreconditionFailedError(AppError):
    kind = ErrorKind.PRECONDITION_FAILED
    default_message = "Precondition failed"


class UpstreamFailureError(AppError):
    kind = ErrorKind.UPSTREAM_FAILURE
    default_message = "Internal server error"
