"""
Error taxonomy for the reports endpoint.

Each error carries the HTTP status and the fixed message returned to the
client. Diagnostic detail is logged where the error is raised and never
placed in the message.
"""
from fastapi import status


class ReportsAPIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(ReportsAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ReportsAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ReportsAPIError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ReportsAPIError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ReportsAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
