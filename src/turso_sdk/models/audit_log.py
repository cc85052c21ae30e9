# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Audit log models."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, List

from ._base import _ApiModel


@dataclass
class AuditLog(_ApiModel):
    """
    A single audit log entry.

    :param author: Username of the member that triggered the event.
    :type author: str
    :param code: Event code (e.g. ``"db-create"``).
    :type code: str
    :param created_at: Time of the event (UTC).
    :type created_at: datetime.datetime
    :param data: Event-specific payload, kept as decoded JSON.
    :type data: Any
    :param message: Human-readable description of the event.
    :type message: str
    :param origin: Where the event originated (e.g. ``"cli"``, ``"web"``).
    :type origin: str
    """

    author: str
    code: str
    created_at: _dt.datetime
    data: Any
    message: str
    origin: str


@dataclass
class Pagination(_ApiModel):
    page: int
    page_size: int
    total_pages: int
    total_rows: int


@dataclass
class ListAuditLogsResponse(_ApiModel):
    pagination: Pagination
    audit_logs: List[AuditLog]


__all__ = ["AuditLog", "Pagination", "ListAuditLogsResponse"]
