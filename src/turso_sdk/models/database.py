# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Database, instance and usage models for the Turso Platform API.

Several database payloads use capitalized wire names (``Name``, ``DbId``, ``Hostname``,
``IssuedCertCount``) next to snake_case and camelCase ones; each model maps them through
its ``_WIRE_NAMES`` table.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Union

from ._base import _ApiModel


@dataclass
class Database(_ApiModel):
    """
    Database metadata.

    :param name: Database name, unique across the organization.
    :type name: str
    :param db_id: Database UUID.
    :type db_id: str
    :param hostname: DNS hostname used for libSQL and HTTP connections.
    :type hostname: str
    :param is_schema: Whether the database is a parent schema database.
    :type is_schema: bool
    :param block_reads: Whether reads are blocked.
    :type block_reads: bool
    :param block_writes: Whether writes are blocked.
    :type block_writes: bool
    :param allow_attach: Whether other databases may attach this one.
    :type allow_attach: bool
    :param regions: Location codes of the group the database belongs to.
    :type regions: list[str]
    :param primary_region: Primary location code of the group.
    :type primary_region: str
    :param type: Object type (``"logical"``).
    :type type: str
    :param version: libSQL version the database runs.
    :type version: str
    :param group: Name of the group the database belongs to.
    :type group: str
    :param sleeping: Whether the database is sleeping.
    :type sleeping: bool
    :param schema: Name of the parent schema database, if any.
    :type schema: str | None
    :param archived: Whether the database is archived.
    :type archived: bool
    """

    _WIRE_NAMES: ClassVar[Dict[str, str]] = {
        "name": "Name",
        "db_id": "DbId",
        "hostname": "Hostname",
        "primary_region": "primaryRegion",
    }

    name: str
    db_id: str
    hostname: str
    is_schema: bool = False
    block_reads: bool = False
    block_writes: bool = False
    allow_attach: bool = False
    regions: List[str] = field(default_factory=list)
    primary_region: str = ""
    type: str = "logical"
    version: str = ""
    group: str = ""
    sleeping: bool = False
    schema: Optional[str] = None
    archived: bool = False


@dataclass
class DatabaseSeed(_ApiModel):
    """Seed a new database from an existing database, optionally at a point in time."""

    name: str
    timestamp: Optional[_dt.datetime] = None
    type: str = field(default="database", init=False)


@dataclass
class DumpSeed(_ApiModel):
    """Seed a new database from an uploaded dump (see ``client.databases.upload_dump``)."""

    url: str
    type: str = field(default="dump", init=False)


@dataclass
class CreateDatabase(_ApiModel):
    """
    Request body for database creation.

    :param name: Database name.
    :type name: str
    :param group: Group the database is created in.
    :type group: str
    :param is_schema: Create a parent schema database.
    :type is_schema: bool
    :param schema: Name of the parent schema database to attach to.
    :type schema: str | None
    :param seed: Optional seed source.
    :type seed: DatabaseSeed | DumpSeed | None
    :param size_limit: Maximum size, e.g. ``"256mb"``.
    :type size_limit: str | None

    Example::

        client.databases.create("my-org", CreateDatabase(name="db1", group="default"))
    """

    name: str
    group: str
    is_schema: bool = False
    schema: Optional[str] = None
    seed: Optional[Union[DatabaseSeed, DumpSeed]] = None
    size_limit: Optional[str] = None


@dataclass
class CreatedDatabase(_ApiModel):
    _WIRE_NAMES: ClassVar[Dict[str, str]] = {
        "db_id": "DbId",
        "name": "Name",
        "hostname": "Hostname",
        "issued_cert_count": "IssuedCertCount",
        "issued_cert_limit": "IssuedCertLimit",
    }

    db_id: str
    name: str
    hostname: str
    issued_cert_count: int = 0
    issued_cert_limit: int = 0


@dataclass
class CreateDatabaseResponse(_ApiModel):
    """
    Result of a database creation.

    :param database: The created database.
    :type database: CreatedDatabase
    :param username: Database username.
    :type username: str
    :param password: Database password.
    :type password: str
    """

    database: CreatedDatabase
    username: str
    password: str


@dataclass
class ListDatabasesResponse(_ApiModel):
    databases: List[Database]


@dataclass
class RetrieveDatabaseResponse(_ApiModel):
    database: Database


@dataclass
class DeleteDatabaseResponse(_ApiModel):
    database: str


@dataclass
class ConfigurationResponse(_ApiModel):
    size_limit: Optional[str] = None
    allow_attach: bool = False
    block_reads: bool = False
    block_writes: bool = False


@dataclass
class UpdateConfigurationRequest(_ApiModel):
    """Request body for a database configuration update. All fields are sent."""

    block_reads: bool
    block_writes: bool
    size_limit: str
    allow_attach: bool


@dataclass
class Usage(_ApiModel):
    rows_read: int = 0
    rows_written: int = 0
    storage_bytes: int = 0
    bytes_synced: int = 0


@dataclass
class InstanceUsage(_ApiModel):
    uuid: str
    usage: Usage


@dataclass
class DatabaseUsage(_ApiModel):
    uuid: str
    usage: Usage
    instances: List[InstanceUsage] = field(default_factory=list)


@dataclass
class DatabaseUsageResponse(_ApiModel):
    """
    Usage of a database over the requested period.

    :param total: Usage summed over all instances.
    :type total: Usage
    :param database: Per-instance breakdown, when returned by the server.
    :type database: DatabaseUsage | None
    """

    total: Usage
    database: Optional[DatabaseUsage] = None


@dataclass
class Instance(_ApiModel):
    """
    Database instance.

    :param uuid: Instance identifier.
    :type uuid: str
    :param name: Instance name (its location code).
    :type name: str
    :param type: ``"primary"`` or ``"replica"``.
    :type type: str
    :param region: Location code of the instance.
    :type region: str
    :param hostname: DNS hostname of the instance.
    :type hostname: str
    """

    uuid: str
    name: str
    type: str
    region: str
    hostname: str


@dataclass
class ListInstancesResponse(_ApiModel):
    instances: List[Instance]


@dataclass
class InstanceResponse(_ApiModel):
    instance: Instance


@dataclass
class QueryStatistics(_ApiModel):
    query: str
    rows_read: int
    rows_written: int


@dataclass
class StatsResponse(_ApiModel):
    top_queries: Optional[List[QueryStatistics]] = None


@dataclass
class UploadDumpResponse(_ApiModel):
    dump_url: str


__all__ = [
    "Database",
    "DatabaseSeed",
    "DumpSeed",
    "CreateDatabase",
    "CreatedDatabase",
    "CreateDatabaseResponse",
    "ListDatabasesResponse",
    "RetrieveDatabaseResponse",
    "DeleteDatabaseResponse",
    "ConfigurationResponse",
    "UpdateConfigurationRequest",
    "Usage",
    "InstanceUsage",
    "DatabaseUsage",
    "DatabaseUsageResponse",
    "Instance",
    "ListInstancesResponse",
    "InstanceResponse",
    "QueryStatistics",
    "StatsResponse",
    "UploadDumpResponse",
]
