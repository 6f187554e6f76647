"""
Error taxonomy shared by the catalog pipeline.

- ValidationError: bad input, raised before any network or storage call
- RemoteApiError: non-2xx or transport failure from an external service
- NotFoundError: entity absent where the caller requires it
- PersistenceError: storage write failure
"""
from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog pipeline errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class PersistenceError(CatalogError):
    status_code = 500


class RemoteApiError(CatalogError):
    """Failure reported by (or while reaching) an external HTTP service."""

    status_code = 502

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.http_status = http_status

    def __repr__(self) -> str:
        return f"RemoteApiError(message={self.message!r}, http_status={self.http_status})"
