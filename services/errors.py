"""
Typed errors raised by content operations.

Each error carries a machine-readable code and the HTTP status the API layer
answers with. Internal errors keep the original exception as ``cause`` for
diagnostics; it is logged, never sent to the client.
"""


class OperationError(Exception):
    """Base exception for content operation failures."""

    code = "INTERNAL_SERVER_ERROR"
    status = 500

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class BadRequestError(OperationError):
    """Client input was rejected (validation or platform constraints)."""

    code = "BAD_REQUEST"
    status = 400


class NotFoundError(OperationError):
    """The referenced content does not exist for the acting user."""

    code = "NOT_FOUND"
    status = 404


class InternalServerError(OperationError):
    """The AI backend or the content store failed."""

    code = "INTERNAL_SERVER_ERROR"
    status = 500
