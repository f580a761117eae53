"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ChirpException (base, 500)
       │
       ├── BadRequestError (400)        ← Invalid input, self-follow, bad upload
       ├── AuthenticationError (401)    ← Invalid credentials, token expired
       ├── AuthorizationError (403)     ← Not the owner of the resource
       ├── NotFoundError (404)          ← Resource not found
       │      ├── UserNotFoundError
       │      ├── PostNotFoundError
       │      ├── LikeNotFoundError
       │      ├── FollowNotFoundError
       │      ├── MessageNotFoundError
       │      └── NotificationNotFoundError
       ├── ConflictError (409)          ← Resource already exists
       │      └── DuplicateResourceError
       └── InternalServerError (500)

Usage:
======
    from chirp.shared.core.exceptions import NotFoundError, BadRequestError

    raise NotFoundError("Post", post_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Post with id 'abc' not found"}}

    raise BadRequestError("You cannot follow yourself")

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "User with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class ChirpException(Exception):
    """
    Base exception for all Chirp application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# BAD REQUEST (400)
# ═══════════════════════════════════════════════════════════════════════════════


class BadRequestError(ChirpException):
    """
    Bad request error (400 Bad Request).

    Raised when input passes schema validation but breaks a business rule.
    """

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ChirpException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid credentials
    - Token expired or malformed
    - Token refers to a deleted user
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(ChirpException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but does not own the resource.
    """

    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ChirpException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: Any = None) -> None:
        super().__init__(resource="User", resource_id=user_id)


class PostNotFoundError(NotFoundError):
    """Post not found error."""

    def __init__(self, post_id: Any = None) -> None:
        super().__init__(resource="Post", resource_id=post_id)


class LikeNotFoundError(NotFoundError):
    """Like not found error."""

    def __init__(self, like_id: Any = None) -> None:
        super().__init__(resource="Like", resource_id=like_id)


class FollowNotFoundError(NotFoundError):
    """Follow relationship not found error."""

    def __init__(self) -> None:
        super().__init__(resource="Follow relationship")


class MessageNotFoundError(NotFoundError):
    """Direct message not found error."""

    def __init__(self, message_id: Any = None) -> None:
        super().__init__(resource="Message", resource_id=message_id)


class NotificationNotFoundError(NotFoundError):
    """Notification not found error."""

    def __init__(self, notification_id: Any = None) -> None:
        super().__init__(resource="Notification", resource_id=notification_id)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(ChirpException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVER ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class InternalServerError(ChirpException):
    """Unexpected server-side failure surfaced with a generic message."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR",
            details=details,
        )
