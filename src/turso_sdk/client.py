# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

from __future__ import annotations

import threading
from typing import Optional

import requests

from .core._http import _HttpClient
from .core.config import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, TursoConfig
from .models._base import _CodecOptions
from .operations.api_tokens import ApiTokenOperations
from .operations.audit_logs import AuditLogOperations
from .operations.databases import DatabaseOperations
from .operations.groups import GroupOperations
from .operations.instances import InstanceOperations
from .operations.locations import LocationOperations
from .operations.organizations import InviteOperations, MemberOperations, OrganizationOperations


class TursoClient:
    """
    High-level client for the Turso Platform API.

    This client exposes the platform's management REST API as typed method calls. It
    handles bearer authentication, request construction, retries of server errors and
    JSON decoding, and delegates HTTP traffic to an internal
    :class:`~turso_sdk.core._http._HttpClient`.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager ensures the HTTP session is released::

            with TursoClient("token") as client:
                locations = client.locations.list().locations
            # Resources automatically cleaned up

    **Without Context Manager**:
        Resources are created lazily on first use. Call ``close()`` when done::

            client = TursoClient.using("token")
            try:
                client.databases.list("my-org")
            finally:
                client.close()

    Operations are organized under namespaces:

        - ``client.organizations``: organizations, billing and usage
        - ``client.members``: organization members
        - ``client.invites``: organization invites
        - ``client.audit_logs``: organization audit logs
        - ``client.groups``: groups, their locations and group tokens
        - ``client.databases``: databases, configuration, tokens and dumps
        - ``client.instances``: database instances
        - ``client.api_tokens``: platform API tokens
        - ``client.locations``: available locations

    Every operation returns its typed result or raises exactly one of
    :class:`~turso_sdk.core.errors.ApiError` (the platform reported an error),
    :class:`~turso_sdk.core.errors.UnexpectedResultError` (transport failure or a
    payload matching neither the expected type nor the error envelope) or
    :class:`~turso_sdk.core.errors.ValidationError` (a precondition failed before
    any request was sent).

    :param auth_token: Platform API token, sent as ``Authorization: Bearer <token>``.
    :type auth_token: :class:`str`
    :param base_url: API base URL. Defaults to ``https://api.turso.tech``.
    :type base_url: :class:`str` or None
    :param max_retries: Maximum number of retries of a 5xx response. Defaults to 3.
    :type max_retries: :class:`int` or None
    :param config: Full configuration. ``base_url`` and ``max_retries``, when given,
        override the corresponding values of ``config``.
    :type config: ~turso_sdk.core.config.TursoConfig or None
    :param session: Optional session to issue requests on, for example with custom
        adapters mounted. A caller-supplied session is never closed by the client.
    :type session: :class:`requests.Session` or None

    .. note::
        The client is safe to share between threads; requests run on the calling thread.
    """

    def __init__(
        self,
        auth_token: str,
        *,
        base_url: Optional[str] = None,
        max_retries: Optional[int] = None,
        config: Optional[TursoConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = config or TursoConfig.defaults()
        changes = {"auth_token": auth_token}
        if base_url is not None:
            changes["base_url"] = base_url
        if max_retries is not None:
            changes["max_retries"] = max_retries
        self._config = config.replace(**changes)
        self._codec = _CodecOptions()
        self._http: Optional[_HttpClient] = None
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False
        self._lock = threading.Lock()

        # Initialize operation namespaces
        self.members = MemberOperations(self)
        self.invites = InviteOperations(self)
        self.audit_logs = AuditLogOperations(self)
        self.organizations = OrganizationOperations(self)
        self.groups = GroupOperations(self)
        self.databases = DatabaseOperations(self)
        self.instances = InstanceOperations(self)
        self.api_tokens = ApiTokenOperations(self)
        self.locations = LocationOperations(self)

    @classmethod
    def using(
        cls,
        auth_token: str,
        base_url: str = DEFAULT_BASE_URL,
        max_retries: int = DEFAULT_MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ) -> "TursoClient":
        """
        Create a client from a token and optional transport settings.

        :param auth_token: Platform API token.
        :type auth_token: :class:`str`
        :param base_url: API base URL.
        :type base_url: :class:`str`
        :param max_retries: Maximum number of retries of a 5xx response.
        :type max_retries: :class:`int`
        :param session: Optional session with custom adapters mounted.
        :type session: :class:`requests.Session` or None
        :rtype: TursoClient

        Example::

            client = TursoClient.using(os.environ["TURSO_API_TOKEN"], max_retries=5)
        """
        return cls(auth_token, base_url=base_url, max_retries=max_retries, session=session)

    @property
    def config(self) -> TursoConfig:
        return self._config

    def __enter__(self) -> "TursoClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied. An
        internal HTTP client created by an earlier call is released so that later
        calls run on this session.

        :return: The client instance.
        :rtype: TursoClient
        """
        with self._lock:
            if self._session is None:
                if self._http is not None:
                    self._http.close()
                    self._http = None
                self._session = requests.Session()
                self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Closes the internal HTTP client and any session created by the client. Safe to
        call multiple times.
        """
        with self._lock:
            if self._http is not None:
                self._http.close()
                self._http = None
            if self._session is not None and self._owns_session:
                self._session.close()
                self._session = None
                self._owns_session = False

    def _get_http(self) -> _HttpClient:
        """
        Get or create the internal HTTP client.

        Construction is deferred until the first API call and happens once, even when
        several threads make their first call at the same time. When a session exists
        (supplied by the caller or created by the context manager) it is reused.

        :rtype: ~turso_sdk.core._http._HttpClient
        """
        http = self._http
        if http is None:
            with self._lock:
                if self._http is None:
                    self._http = _HttpClient(self._config, session=self._session)
                http = self._http
        return http


__all__ = ["TursoClient"]
