"""Application errors raised by the services.

Each error carries the HTTP status it maps to; ``app.main`` registers a
handler that renders any of them as ``{"detail": message}``.
"""


class QnAError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(QnAError):
    """Missing, malformed, unknown or expired token, or bad credentials."""

    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(QnAError):
    """Authenticated, but neither the owner nor an admin."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(QnAError):
    status_code = 404
    default_message = "Not found"


class ValidationError(QnAError):
    status_code = 400
    default_message = "Invalid request"


class InternalError(QnAError):
    """Store or hashing failure. The raw cause is logged, never returned."""
