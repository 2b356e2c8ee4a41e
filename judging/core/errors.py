from typing import Optional

from fastapi import HTTPException


class JudgingError(HTTPException):
    """Base for errors that map straight onto an HTTP status and an `error` message."""

    status_code = 500
    default_detail = "Server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class InvalidCredentials(JudgingError):
    status_code = 401
    default_detail = "Invalid credentials"


class DuplicateResource(JudgingError):
    status_code = 400
    default_detail = "Resource already exists"


class NotFound(JudgingError):
    status_code = 404
    default_detail = "Not found"


class InvalidScore(JudgingError):
    status_code = 400
    default_detail = "Score out of range"


class DependentRowsExist(JudgingError):
    status_code = 400
    default_detail = "Resource has dependent rows"


class UnclassifiedFailure(JudgingError):
    status_code = 500
    default_detail = "Server error"
