# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Database instance operations namespace."""

from __future__ import annotations

from ..models.database import InstanceResponse, ListInstancesResponse
from ._base import _Operations, _segment

__all__ = ["InstanceOperations"]


class InstanceOperations(_Operations):
    """Namespace for database instance operations, accessed via ``client.instances``.

    Example::

        for instance in client.instances.list("my-org", "db1").instances:
            print(instance.name, instance.type, instance.hostname)
    """

    @staticmethod
    def _path(organization: str, database: str) -> str:
        return (
            f"/v1/organizations/{_segment(organization, 'organization')}"
            f"/databases/{_segment(database, 'database')}/instances"
        )

    def list(self, organization: str, database: str) -> ListInstancesResponse:
        """List the instances (primary and replicas) of a database."""
        return self._call("GET", self._path(organization, database), ListInstancesResponse)

    def retrieve(self, organization: str, database: str, instance: str) -> InstanceResponse:
        """Retrieve one instance of a database by name (its location code)."""
        path = f"{self._path(organization, database)}/{_segment(instance, 'instance')}"
        return self._call("GET", path, InstanceResponse)
