"""Application-level exception types.

Convention:
- ``InternalServerError`` — for errors whose details must never reach clients.
  The global handler logs the full message at ERROR and returns a generic
  "Internal server error" (500) to the client.
- ``MissingMetadataError`` — a required site metadata field (such as the
  author's name) is absent.  Rendering stops at the first such fault; no
  partial block is produced.
- ``ValueError`` — for validation errors that are safe to forward to clients.
"""

from __future__ import annotations


class InternalServerError(Exception):
    """Raised for internal errors whose details must not be exposed to clients.

    The global exception handler in ``siteshell/main.py`` catches this, logs
    the full message server-side, and returns HTTP 500 with a generic
    ``"Internal server error"`` detail.
    """


class MissingMetadataError(InternalServerError):
    """Raised when a required site metadata field is missing at render time."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Required site metadata field is missing: {field}")
        self.field = field
