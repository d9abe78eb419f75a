"""
Structured application error

Carries a machine-readable code, a human message and the HTTP status the
API layer should answer with.

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Application error with code, message, HTTP status and optional metadata

    Can be returned inside a failed Result or raised; the error middleware
    renders raised ones as {"code", "message"} with http_code.
    """

    def __init__(
        self,
        code: str,
        message: str,
        http_code: int = 400,
        meta: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_code = http_code
        self.meta = meta or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"{type(self).__name__} [{self.code}]: {self.message}"

    def __repr__(self) -> str:
        return f"AppError(code={self.code!r}, message={self.message!r}, http_code={self.http_code})"

    def is_code(self, code: str) -> bool:
        return self.code == code

    def has_http_code(self, http_code: int) -> bool:
        return self.http_code == http_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': type(self).__name__,
            'code': self.code,
            'message': self.message,
            'http_code': self.http_code,
            'meta': self.meta,
            'timestamp': self.timestamp.isoformat()
        }

    # Factory helpers for common errors

    @classmethod
    def validation(cls, message: str, meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('VALIDATION_ERROR', message, 400, meta)

    @classmethod
    def not_found(cls, resource: str, meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('RESOURCE_NOT_FOUND', f"{resource} not found", 404, meta)

    @classmethod
    def conflict(cls, message: str, meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('CONFLICT_ERROR', message, 409, meta)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized", meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('UNAUTHORIZED', message, 401, meta)

    @classmethod
    def forbidden(cls, message: str = "Insufficient permissions", meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('FORBIDDEN', message, 403, meta)

    @classmethod
    def internal(cls, message: str = "Internal server error", meta: Optional[Dict[str, Any]] = None) -> "AppError":
        return cls('INTERNAL_ERROR', message, 500, meta)
