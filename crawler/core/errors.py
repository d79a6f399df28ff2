"""
Error types raised by the fetch cache, the parsers and the inspection service.

Every error carries an ErrorKind tag plus structured fields, so callers can
branch on the kind instead of matching message text.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    FETCH = "fetch"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class CrawlerError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def fields(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form: kind, message and the structured fields"""
        return {"kind": self.kind.value, "message": self.message, **self.fields()}


class FetchError(CrawlerError):
    """Non-2xx response or transport failure. Never retried."""

    kind = ErrorKind.FETCH

    def __init__(self, url: str, status: Optional[int] = None, status_text: str = ""):
        self.url = url
        self.status = status
        self.status_text = status_text
        if status is None:
            message = f"Failed to fetch {url}: {status_text}"
        else:
            message = f"HTTP {status}: {status_text}"
        super().__init__(message)

    def fields(self) -> Dict[str, Any]:
        return {"url": self.url, "status": self.status, "status_text": self.status_text}


class NotFoundError(CrawlerError):
    """Unknown group or target identifier."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource.capitalize()} not found: {identifier}")

    def fields(self) -> Dict[str, Any]:
        return {"resource": self.resource, "identifier": self.identifier}


class ValidationError(CrawlerError):
    """Missing or invalid caller-supplied parameter."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)

    def fields(self) -> Dict[str, Any]:
        return {"field": self.field}
