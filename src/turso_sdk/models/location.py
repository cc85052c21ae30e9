# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ._base import _ApiModel


@dataclass
class ListLocationsResponse(_ApiModel):
    """
    Available locations, keyed by location code.

    Example::

        response = client.locations.list()
        print(response.locations["ams"])  # "Amsterdam, Netherlands"
    """

    locations: Dict[str, str]


__all__ = ["ListLocationsResponse"]
