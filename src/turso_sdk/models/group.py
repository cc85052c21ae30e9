# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Group models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ._base import _ApiModel


class LibSqlExtension(str, Enum):
    """libSQL extensions that can be enabled on a group."""

    VECTOR = "vector"
    CRYPTO = "crypto"
    FUZZY = "fuzzy"
    MATH = "math"
    STATS = "stats"
    TEXT = "text"
    UNICODE = "unicode"
    UUID = "uuid"
    REGEXP = "regexp"
    VEC = "vec"


@dataclass
class Group(_ApiModel):
    """
    Group metadata.

    :param uuid: Group identifier.
    :type uuid: str
    :param name: Group name, unique across the organization.
    :type name: str
    :param primary: Primary location code.
    :type primary: str
    :param locations: Location codes the group is replicated to.
    :type locations: list[str]
    :param archived: Whether the group was archived due to inactivity.
    :type archived: bool
    :param version: libSQL server version of the group.
    :type version: str
    """

    uuid: str
    name: str
    primary: str
    locations: List[str] = field(default_factory=list)
    archived: bool = False
    version: str = ""


@dataclass
class GroupResponse(_ApiModel):
    group: Group


@dataclass
class ListGroupsResponse(_ApiModel):
    groups: List[Group]


@dataclass
class CreateGroup(_ApiModel):
    """
    Request body for group creation.

    :param name: Group name.
    :type name: str
    :param location: Primary location code (see ``client.locations.list()``).
    :type location: str
    :param extensions: Optional libSQL extensions to enable.
    :type extensions: list[LibSqlExtension] | None
    """

    name: str
    location: str
    extensions: Optional[List[LibSqlExtension]] = None


@dataclass
class TransferGroupRequest(_ApiModel):
    organization: str


__all__ = [
    "LibSqlExtension",
    "Group",
    "GroupResponse",
    "ListGroupsResponse",
    "CreateGroup",
    "TransferGroupRequest",
]
