# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Audit log operations namespace."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.audit_log import ListAuditLogsResponse
from ._base import _Operations, _segment

__all__ = ["AuditLogOperations"]


class AuditLogOperations(_Operations):
    """Namespace for audit log operations.

    Accessed via ``client.audit_logs`` or ``client.organizations.audit_logs``.
    One call returns one page; iterate pages by passing ``page``.

    Example::

        logs = client.audit_logs.list("my-org", page_size=50)
        for entry in logs.audit_logs:
            print(entry.created_at, entry.code, entry.author)
        print(logs.pagination.total_pages)
    """

    def list(
        self,
        organization: str,
        *,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> ListAuditLogsResponse:
        """List audit logs of an organization.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param page_size: Entries per page (server default when omitted).
        :type page_size: :class:`int` or None
        :param page: One-based page number (server default when omitted).
        :type page: :class:`int` or None
        :rtype: ~turso_sdk.models.audit_log.ListAuditLogsResponse
        """
        params: Dict[str, Any] = {}
        if page_size is not None:
            params["page_size"] = int(page_size)
        if page is not None:
            params["page"] = int(page)
        path = f"/v1/organizations/{_segment(organization, 'organization')}/audit-logs"
        return self._call("GET", path, ListAuditLogsResponse, params=params or None)
