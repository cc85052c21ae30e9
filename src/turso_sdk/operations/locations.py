# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Locations operations namespace."""

from __future__ import annotations

from ..models.location import ListLocationsResponse
from ._base import _Operations

__all__ = ["LocationOperations"]


class LocationOperations(_Operations):
    """Namespace for location operations, accessed via ``client.locations``.

    Example::

        for code, description in client.locations.list().locations.items():
            print(code, description)
    """

    def list(self) -> ListLocationsResponse:
        """List locations where groups can be created or replicated."""
        return self._call("GET", "/v1/locations", ListLocationsResponse)
