# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.turso.tech"
DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class TursoConfig:
    """
    Configuration settings for Turso Platform API client operations.

    A single instance is built per :class:`~turso_sdk.client.TursoClient` and shared,
    read-only, by every operation namespace created from that client.

    :param base_url: API host URL (default: ``https://api.turso.tech``).
    :type base_url: str
    :param auth_token: Platform API token sent as ``Authorization: Bearer <token>``.
        Never included in ``repr()``.
    :type auth_token: str
    :param max_retries: Maximum number of retries for requests answered with a 5xx
        status (default: 3, so at most 4 attempts).
    :type max_retries: int
    :param timeout: Default per-request timeout in seconds (default: 30.0).
    :type timeout: float
    :param backoff: Base delay in seconds for exponential backoff (default: 1.0).
    :type backoff: float
    :param max_backoff: Maximum delay between retry attempts in seconds (default: 60.0).
    :type max_backoff: float
    :param jitter: Whether to add jitter to retry delays (default: True).
    :type jitter: bool
    """

    base_url: str = DEFAULT_BASE_URL
    auth_token: str = field(default="", repr=False)

    # HTTP retry and resilience configuration
    max_retries: int = DEFAULT_MAX_RETRIES
    timeout: float = DEFAULT_TIMEOUT
    backoff: float = 1.0
    max_backoff: float = 60.0
    jitter: bool = True

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def defaults(cls, auth_token: str = "") -> "TursoConfig":
        """
        Create a configuration instance with default settings.

        :param auth_token: Platform API token.
        :type auth_token: str
        :return: Configuration instance with default values.
        :rtype: ~turso_sdk.core.config.TursoConfig
        """
        return cls(auth_token=auth_token)

    def replace(self, **changes) -> "TursoConfig":
        """Return a copy of this configuration with ``changes`` applied."""
        return dataclasses.replace(self, **changes)
