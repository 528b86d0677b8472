# /app/services/service_errors.py

"""
Error taxonomy shared by every service. Routers translate these into HTTP
responses; each class carries the status code it maps to.
"""

from typing import Optional


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.upstream_status = upstream_status

    def to_detail(self) -> dict:
        body = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        if self.upstream_status is not None:
            body["status"] = self.upstream_status
        return body


class InvalidInputError(ServiceError):
    """The caller's payload is missing or malformed."""
    status_code = 400


class StorageError(ServiceError):
    """A database read or write failed."""
    status_code = 500


class UpstreamUnavailableError(ServiceError):
    """The AI endpoint could not be reached at all."""
    status_code = 502


class UpstreamError(ServiceError):
    """The AI endpoint answered with a non-success status."""
    status_code = 502


class UpstreamFormatError(ServiceError):
    """The AI endpoint answered, but not with usable content."""
    status_code = 502
