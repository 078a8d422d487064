# =============================================================================
# app/exceptions.py - Error Taxonomy and Exception Handlers
# =============================================================================
# Every failure the server knows about is a StarterServerError subclass.
# Errors carry a machine-readable code and, where possible, a suggestion
# that says how to fix the problem rather than only what failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class StarterServerError(Exception):
    """
    Base exception for the starter server.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "STARTER_SERVER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration
# =============================================================================

class ConfigurationError(StarterServerError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, setting: str, reason: str = "is not set"):
        super().__init__(
            message=f"Configuration error: {setting} {reason}",
            code="CONFIGURATION_ERROR",
            suggestion=f"Set {setting} in the environment or in your .env file",
            details={"setting": setting},
        )


# =============================================================================
# Database
# =============================================================================

class DatabaseConnectionError(StarterServerError):
    """Raised when the MongoDB server cannot be reached."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Could not connect to MongoDB: {error}",
            code="DATABASE_CONNECTION_FAILED",
            status_code=503,
            suggestion="Check MONGO_URI and that the database server is reachable",
        )


# =============================================================================
# Credentials and Tokens
# =============================================================================

class HashingError(StarterServerError):
    """Raised when a password cannot be hashed."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Password hashing failed: {error}",
            code="HASHING_FAILED",
            suggestion="Check BCRYPT_ROUNDS and that the system entropy source is available",
        )


class TokenExpiredError(StarterServerError):
    """Raised when a token's exp claim is in the past."""

    def __init__(self):
        super().__init__(
            message="Token has expired",
            code="TOKEN_EXPIRED",
            status_code=401,
            suggestion="Issue a new token",
        )


class InvalidSignatureError(StarterServerError):
    """Raised when a token is malformed or was not signed with the given secret."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Invalid token: {error}",
            code="INVALID_SIGNATURE",
            status_code=401,
            suggestion="Check that the token was issued with the same JWT_SECRET",
        )


# =============================================================================
# Outbound Services
# =============================================================================

class MailError(StarterServerError):
    """Raised when the mail relay rejects or cannot deliver a message."""

    def __init__(self, error: str, recipient: str | None = None):
        super().__init__(
            message=f"Error sending email: {error}",
            code="MAIL_FAILED",
            status_code=502,
            suggestion="Check EMAIL_USER, EMAIL_PASS and the SMTP_HOST/SMTP_PORT relay settings",
            details={"recipient": recipient} if recipient else None,
        )


class FetchError(StarterServerError):
    """Raised when an outbound GET fails or returns a non-2xx status."""

    def __init__(self, url: str, error: str, status: int | None = None):
        details: dict[str, Any] = {"url": url}
        if status is not None:
            details["status"] = status
        super().__init__(
            message=f"Error fetching API data: {error}",
            code="FETCH_FAILED",
            status_code=502,
            suggestion="Check that the URL is reachable from this host",
            details=details,
        )
        self.status = status


# =============================================================================
# Exception Handlers
# =============================================================================

async def starter_server_exception_handler(
    request: Request,
    exc: StarterServerError
) -> JSONResponse:
    """
    Convert StarterServerError to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )

