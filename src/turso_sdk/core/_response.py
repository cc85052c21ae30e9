# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Response decoding and error classification.

Every operation hands its raw :class:`requests.Response` to :func:`_handle_response`
together with the type it expects. The response is decoded as that type; if this fails,
the same body is decoded again as the platform's error envelope. The outcome is exactly
one of: the typed value, :class:`~turso_sdk.core.errors.ApiError`, or
:class:`~turso_sdk.core.errors.UnexpectedResultError`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..models._base import DEFAULT_CODEC, SchemaError, _CodecOptions, decode_value
from ._error_codes import (
    UNEXPECTED_INVALID_PAYLOAD,
    UNEXPECTED_SCHEMA_MISMATCH,
    UNEXPECTED_TRANSPORT_FAILURE,
    is_transient_status,
)
from .errors import ApiError, UnexpectedResultError

logger = logging.getLogger(__name__)

_BODY_EXCERPT_LIMIT = 1000

# Envelope members carrying the error text, in order of preference.
_ENVELOPE_KEYS = ("message", "error")


class _ContentError(Exception):
    """The response body could not be obtained as JSON (status, empty or malformed body)."""


def _describe(response: requests.Response) -> str:
    request = getattr(response, "request", None)
    method = getattr(request, "method", None) or "?"
    url = getattr(request, "path_url", None) or getattr(response, "url", "") or "?"
    return f"{method} {url}"


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code <= 299


def _read_json(response: requests.Response) -> Any:
    if not response.content or not response.content.strip():
        raise _ContentError(f"Empty response body for {_describe(response)}")
    try:
        return response.json()
    except ValueError as exc:
        raise _ContentError(f"Malformed JSON in response to {_describe(response)}: {exc}") from exc


def _decode_success(response: requests.Response, result_type: Any, options: _CodecOptions) -> Any:
    if not _is_success(response):
        reason = f" {response.reason}" if response.reason else ""
        raise _ContentError(f"HTTP {response.status_code}{reason} for {_describe(response)}")
    if result_type is None:
        return None
    return decode_value(result_type, _read_json(response), options)


def _decode_error_envelope(response: requests.Response) -> Optional[str]:
    """Return the message of an error envelope, or ``None`` if the body is not one."""
    try:
        data = _read_json(response)
    except _ContentError:
        return None
    if not isinstance(data, dict):
        return None
    for key in _ENVELOPE_KEYS:
        value = data.get(key)
        if isinstance(value, str):
            return value
    return None


def _body_excerpt(response: requests.Response) -> Optional[str]:
    text = response.text
    return text[:_BODY_EXCERPT_LIMIT] if text else None


def _handle_response(
    response: requests.Response,
    result_type: Any,
    options: _CodecOptions = DEFAULT_CODEC,
) -> Any:
    """
    Convert one HTTP response into a typed value or a classified error.

    :param response: Raw HTTP response.
    :type response: :class:`requests.Response`
    :param result_type: Expected success type: an ``_ApiModel`` subclass, a ``List[...]`` /
        ``Dict[...]`` of those, or ``None`` for operations without content.
    :param options: JSON codec configuration.
    :type options: ~turso_sdk.models._base._CodecOptions
    :return: The decoded value (``None`` for no-content operations).
    :raises ~turso_sdk.core.errors.ApiError: If the body is a platform error envelope.
    :raises ~turso_sdk.core.errors.UnexpectedResultError: If the body matches neither the
        expected type nor the error envelope.
    """
    status = response.status_code
    try:
        return _decode_success(response, result_type, options)
    except SchemaError as exc:
        primary: Exception = exc
        subcode = UNEXPECTED_SCHEMA_MISMATCH
    except _ContentError as exc:
        primary = exc
        subcode = UNEXPECTED_INVALID_PAYLOAD
    except Exception as exc:
        logger.debug("Unclassified decode failure for %s: %s", _describe(response), exc)
        raise UnexpectedResultError(
            str(exc),
            subcode=UNEXPECTED_INVALID_PAYLOAD,
            status_code=status,
            is_transient=is_transient_status(status),
        ) from exc

    message = _decode_error_envelope(response)
    if message is not None:
        logger.debug("%s returned error envelope (HTTP %s): %s", _describe(response), status, message)
        raise ApiError(message, status_code=status, body_excerpt=_body_excerpt(response)) from primary

    logger.debug("%s returned an unexpected result (HTTP %s): %s", _describe(response), status, primary)
    raise UnexpectedResultError(
        str(primary),
        subcode=subcode,
        status_code=status,
        is_transient=is_transient_status(status),
        details={"body_excerpt": _body_excerpt(response)},
    ) from primary


def _transport_failure(exc: requests.exceptions.RequestException) -> UnexpectedResultError:
    """Wrap an exchange that never produced a response."""
    return UnexpectedResultError(
        str(exc) or exc.__class__.__name__,
        subcode=UNEXPECTED_TRANSPORT_FAILURE,
        is_transient=True,
    )


__all__ = ["_handle_response", "_transport_failure"]
