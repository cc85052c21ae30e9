# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
HTTP client with server-error retry, timeout handling, and bearer authentication.

This module provides :class:`~turso_sdk.core._http._HttpClient`, a wrapper around a
:class:`requests.Session` bound to one API base URL and one credential. It adds a
default per-request timeout, the ``Authorization`` header, and automatic retries with
exponential backoff for responses carrying a 5xx status code.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Optional

import requests
from requests.structures import CaseInsensitiveDict

from ..__version__ import __version__
from .config import TursoConfig

logger = logging.getLogger(__name__)

USER_AGENT = f"turso-platform-sdk-python/{__version__}"


class _HttpClient:
    """
    HTTP client bound to one base URL and one bearer token.

    Retries are driven by response status only: a response with a 5xx status is retried
    up to ``config.max_retries`` times. Client errors (4xx), successful responses and
    exchanges that never complete (connection errors, timeouts) are not retried.

    :param config: Client configuration (base URL, token, retry and timeout policy).
    :type config: ~turso_sdk.core.config.TursoConfig
    :param session: Optional session to issue requests on. When omitted the client
        creates and owns one; a caller-supplied session is never closed by this client.
    :type session: :class:`requests.Session` | None
    """

    def __init__(self, config: TursoConfig, session: Optional[requests.Session] = None) -> None:
        self.base_url = (config.base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.max_retries = config.max_retries
        self.base_delay = config.backoff
        self.max_backoff = config.max_backoff
        self.jitter = config.jitter
        self.default_timeout = config.timeout
        self._authorization = f"Bearer {config.auth_token}"
        self._owns_session = session is None
        self._session: Optional[requests.Session] = session if session is not None else requests.Session()

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            raise RuntimeError("HTTP client is closed.")
        return self._session

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _prepare_headers(self, headers: Optional[Any], has_json_body: bool) -> CaseInsensitiveDict:
        merged = CaseInsensitiveDict(headers or {})
        # Appended only if absent; an explicit Authorization header always wins.
        if "Authorization" not in merged and "Authorization" not in self.session.headers:
            merged["Authorization"] = self._authorization
        merged.setdefault("User-Agent", USER_AGENT)
        merged.setdefault("Accept", "application/json")
        if has_json_body:
            merged.setdefault("Content-Type", "application/json")
        return merged

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with server-error retry and timeout management.

        :param method: HTTP method (GET, POST, PATCH, DELETE).
        :type method: :class:`str`
        :param path: Path relative to the base URL (e.g. ``"/v1/locations"``) or an absolute URL.
        :type path: :class:`str`
        :param kwargs: Additional arguments passed to :meth:`requests.Session.request`,
            including ``params``, ``json``, ``files`` and ``timeout``.
        :return: The final HTTP response. After exhausting retries this is the last 5xx response.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the exchange did not complete.
        """
        url = self._url(path)
        kwargs["headers"] = self._prepare_headers(kwargs.get("headers"), "json" in kwargs)
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.default_timeout

        attempt = 0
        while True:
            logger.debug("%s %s (attempt %d)", method, url, attempt + 1)
            response = self.session.request(method, url, **kwargs)
            if not self._is_retryable(response) or attempt >= self.max_retries:
                logger.debug("%s %s -> %s", method, url, response.status_code)
                return response

            delay = self._calculate_retry_delay(attempt, response)
            logger.warning(
                "%s %s returned %s; retrying in %.2fs (retry %d of %d)",
                method,
                url,
                response.status_code,
                delay,
                attempt + 1,
                self.max_retries,
            )
            response.close()
            time.sleep(delay)
            attempt += 1

    @staticmethod
    def _is_retryable(response: requests.Response) -> bool:
        return 500 <= response.status_code <= 599

    def _calculate_retry_delay(self, attempt: int, response: Optional[requests.Response] = None) -> float:
        """
        Calculate the delay before the next retry attempt.

        A numeric ``Retry-After`` header takes precedence over the computed delay. Otherwise
        the delay is ``base_delay * 2**attempt``. Both are capped at ``max_backoff``, and
        jitter of up to 25% is applied to the computed delay when enabled.

        :param attempt: Zero-based retry attempt number.
        :type attempt: int
        :param response: Response that triggered the retry, if any.
        :type response: requests.Response or None
        :return: Delay in seconds, never negative.
        :rtype: float
        """
        if response is not None and "Retry-After" in response.headers:
            try:
                retry_after = int(response.headers["Retry-After"])
                return max(0, min(retry_after, self.max_backoff))
            except (ValueError, TypeError):
                pass

        delay = min(self.base_delay * (2**attempt), self.max_backoff)

        if self.jitter:
            jitter_range = delay * 0.25
            delay = max(0, delay + random.uniform(-jitter_range, jitter_range))

        return delay

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        Only a session created by this client is closed. Safe to call multiple times.
        """
        if self._session is not None and self._owns_session:
            self._session.close()
        self._session = None
