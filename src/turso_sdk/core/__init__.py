# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Core infrastructure components for the Turso Platform API SDK.

This module contains the foundational components including configuration,
the HTTP client, response decoding, and error handling.
"""

from .config import TursoConfig
from .errors import ApiError, TursoError, UnexpectedResultError, ValidationError

__all__ = [
    "TursoConfig",
    "TursoError",
    "ApiError",
    "UnexpectedResultError",
    "ValidationError",
]
