# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Structured error types for the Turso Platform API SDK.

Every operation either returns a typed value or raises one of three errors, all
derived from :class:`TursoError`:

- :class:`ApiError`: the server answered with a recognizable error envelope.
- :class:`UnexpectedResultError`: the response matched neither the expected schema nor
  the error envelope, or no response was obtained at all.
- :class:`ValidationError`: a client-side precondition failed before any request was sent.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import http_subcode, is_transient_status


class TursoError(Exception):
    """Base structured error for the Turso Platform API SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(TursoError):
    """Client-side precondition violation; raised before any network call."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class ApiError(TursoError):
    """
    Error reported by the platform through its error envelope.

    The envelope's message is carried verbatim in :attr:`message`.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        is_error_status = status_code is not None and not 200 <= status_code <= 299
        super().__init__(
            message,
            code="api_error",
            subcode=http_subcode(status_code) if is_error_status else None,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=bool(is_error_status and is_transient_status(status_code)),
        )


class UnexpectedResultError(TursoError):
    """
    The response could not be interpreted as the expected result or as an error envelope.

    Also raised when the transport failed before a response was available
    (connection errors, timeouts). The underlying exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        is_transient: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            code="unexpected_result",
            subcode=subcode,
            status_code=status_code,
            details=details,
            source="server" if status_code is not None else "client",
            is_transient=is_transient,
        )


__all__ = ["TursoError", "ApiError", "UnexpectedResultError", "ValidationError"]
