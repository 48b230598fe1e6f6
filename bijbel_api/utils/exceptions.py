"""Custom exceptions for the Bijbel API."""
from fastapi import HTTPException


class NotFoundError(HTTPException):
    """Unknown book, abbreviation or missing data file."""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=404, detail=detail)


class DataParseError(HTTPException):
    """Malformed or inconsistent bundled data.

    The detail is safe to return to clients; parser diagnostics are logged and
    chained as ``__cause__`` instead.
    """
    def __init__(self, detail: str = "Stored data could not be read"):
        super().__init__(status_code=500, detail=detail)
