# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Turso Platform API SDK for Python.

Typed access to the Turso management REST API: organizations, members, invites,
audit logs, groups, databases, instances, API tokens and locations.
"""

from .__version__ import __version__
from .client import TursoClient
from .core.config import TursoConfig
from .core.errors import ApiError, TursoError, UnexpectedResultError, ValidationError

__all__ = [
    "__version__",
    "TursoClient",
    "TursoConfig",
    "TursoError",
    "ApiError",
    "UnexpectedResultError",
    "ValidationError",
]
