# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Shared plumbing for operation namespaces."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING
from urllib.parse import quote

import requests

from ..core._error_codes import VALIDATION_EMPTY_PATH_PARAMETER
from ..core._response import _handle_response, _transport_failure
from ..core.errors import ValidationError
from ..models._base import _ApiModel

if TYPE_CHECKING:
    from ..client import TursoClient


def _segment(value: Any, name: str) -> str:
    """Percent-encode one path parameter, rejecting empty values."""
    text = "" if value is None else str(value)
    if not text.strip():
        raise ValidationError(f"{name} is required.", subcode=VALIDATION_EMPTY_PATH_PARAMETER, details={"parameter": name})
    return quote(text, safe="")


class _Operations:
    """Base class for operation namespaces; holds nothing but the parent client."""

    def __init__(self, client: TursoClient) -> None:
        self._client = client

    def _call(
        self,
        method: str,
        path: str,
        result_type: Any,
        *,
        body: Optional[_ApiModel] = None,
        **kwargs: Any,
    ) -> Any:
        """
        Issue one request and decode its response as ``result_type``.

        :param body: Optional request model, sent as JSON.
        :param kwargs: Passed through to the HTTP client (``params``, ``files``, ``timeout``).
        """
        codec = self._client._codec
        if body is not None:
            kwargs["json"] = body.to_api_payload(codec)
        http = self._client._get_http()
        try:
            response = http.request(method, path, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise _transport_failure(exc) from exc
        return _handle_response(response, result_type, codec)
