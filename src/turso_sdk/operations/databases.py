# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Database operations namespace for the Turso Platform API SDK."""

from __future__ import annotations

import datetime as _dt
import os
from pathlib import Path
from typing import IO, Any, Dict, Optional, Tuple, Union

from ..core._error_codes import VALIDATION_INVALID_DUMP_FILE
from ..core.errors import ValidationError
from ..models._base import format_timestamp
from ..models.common import Authorization, TokenResponse, coerce_choice
from ..models.database import (
    ConfigurationResponse,
    CreateDatabase,
    CreateDatabaseResponse,
    DatabaseUsageResponse,
    DeleteDatabaseResponse,
    ListDatabasesResponse,
    RetrieveDatabaseResponse,
    StatsResponse,
    UpdateConfigurationRequest,
    UploadDumpResponse,
)
from ._base import _Operations, _segment

__all__ = ["DatabaseOperations"]

DUMP_CONTENT_TYPE = "application/octet-stream"

DumpSource = Union[str, "os.PathLike[str]", IO[bytes]]


def _read_dump(source: DumpSource) -> Tuple[str, bytes]:
    """Return ``(filename, content)`` for a dump given as a path or a binary file object."""
    if hasattr(source, "read"):
        content = source.read()
        if not isinstance(content, bytes):
            raise ValidationError(
                "Dump file must be opened in binary mode.", subcode=VALIDATION_INVALID_DUMP_FILE
            )
        name = os.path.basename(str(getattr(source, "name", "") or "")) or "dump.sql"
        return name, content
    path = Path(source)
    if not path.is_file():
        raise ValidationError(
            f"Dump file not found: {path}", subcode=VALIDATION_INVALID_DUMP_FILE, details={"path": str(path)}
        )
    return path.name, path.read_bytes()


def _usage_bound(value: Union[_dt.datetime, str]) -> str:
    if isinstance(value, _dt.datetime):
        return format_timestamp(value)
    return str(value)


class DatabaseOperations(_Operations):
    """Namespace for database operations.

    Accessed via ``client.databases``. Instances of a database are managed through
    ``client.instances``.

    Example::

        created = client.databases.create("my-org", CreateDatabase(name="db1", group="default"))
        print(created.database.hostname)

        token = client.databases.create_token("my-org", "db1", authorization=Authorization.READ_ONLY)
        client.databases.delete("my-org", "db1")
    """

    @staticmethod
    def _path(organization: str, database: Optional[str] = None) -> str:
        path = f"/v1/organizations/{_segment(organization, 'organization')}/databases"
        if database is not None:
            path += f"/{_segment(database, 'database')}"
        return path

    # ------------------------------------------------------------------- list

    def list(self, organization: str) -> ListDatabasesResponse:
        """List databases of an organization.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :rtype: ~turso_sdk.models.database.ListDatabasesResponse
        """
        return self._call("GET", self._path(organization), ListDatabasesResponse)

    # ----------------------------------------------------------------- create

    def create(self, organization: str, database: CreateDatabase) -> CreateDatabaseResponse:
        """Create a database in an existing group.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param database: Name, group and optional seed/schema settings.
        :type database: ~turso_sdk.models.database.CreateDatabase
        :return: The created database with its credentials.
        :rtype: ~turso_sdk.models.database.CreateDatabaseResponse

        Example::

            result = client.databases.create(
                "my-org",
                CreateDatabase(name="db2", group="default", seed=DatabaseSeed(name="db1")),
            )
            print(result.database.db_id, result.username)
        """
        return self._call("POST", self._path(organization), CreateDatabaseResponse, body=database)

    # --------------------------------------------------------------- retrieve

    def retrieve(self, organization: str, database: str) -> RetrieveDatabaseResponse:
        return self._call("GET", self._path(organization, database), RetrieveDatabaseResponse)

    def retrieve_configuration(self, organization: str, database: str) -> ConfigurationResponse:
        path = f"{self._path(organization, database)}/configuration"
        return self._call("GET", path, ConfigurationResponse)

    def update_configuration(
        self,
        organization: str,
        database: str,
        configuration: UpdateConfigurationRequest,
    ) -> ConfigurationResponse:
        """Update a database's configuration.

        :param configuration: New configuration; every field is sent.
        :type configuration: ~turso_sdk.models.database.UpdateConfigurationRequest
        :rtype: ~turso_sdk.models.database.ConfigurationResponse
        """
        path = f"{self._path(organization, database)}/configuration"
        return self._call("PATCH", path, ConfigurationResponse, body=configuration)

    # ------------------------------------------------------------ usage/stats

    def usage(
        self,
        organization: str,
        database: str,
        *,
        from_: Optional[Union[_dt.datetime, str]] = None,
        to: Optional[Union[_dt.datetime, str]] = None,
    ) -> DatabaseUsageResponse:
        """Retrieve usage of a database, optionally limited to a time range.

        :param from_: Start of the range. Datetimes are sent as UTC ISO-8601
            (naive values are taken as UTC).
        :type from_: :class:`datetime.datetime` or :class:`str` or None
        :param to: End of the range.
        :type to: :class:`datetime.datetime` or :class:`str` or None
        :rtype: ~turso_sdk.models.database.DatabaseUsageResponse

        .. note::
            Not every API deployment serves this endpoint.
        """
        params: Dict[str, Any] = {}
        if from_ is not None:
            params["from"] = _usage_bound(from_)
        if to is not None:
            params["to"] = _usage_bound(to)
        path = f"{self._path(organization, database)}/usage"
        return self._call("GET", path, DatabaseUsageResponse, params=params or None)

    def stats(self, organization: str, database: str) -> StatsResponse:
        """Retrieve the top queries of a database.

        .. note::
            Not every API deployment serves this endpoint.
        """
        return self._call("GET", f"{self._path(organization, database)}/stats", StatsResponse)

    # ----------------------------------------------------------------- delete

    def delete(self, organization: str, database: str) -> DeleteDatabaseResponse:
        """Delete a database.

        .. warning::
            This operation is irreversible.
        """
        return self._call("DELETE", self._path(organization, database), DeleteDatabaseResponse)

    # ----------------------------------------------------------------- tokens

    def create_token(
        self,
        organization: str,
        database: str,
        *,
        expiration: str = "never",
        authorization: Union[Authorization, str] = Authorization.FULL_ACCESS,
    ) -> TokenResponse:
        """Create an auth token for a database.

        :param expiration: Lifetime such as ``"2w1d30m"``, or ``"never"`` (default).
        :type expiration: :class:`str`
        :param authorization: Access level (default full access).
        :type authorization: ~turso_sdk.models.common.Authorization
        :rtype: ~turso_sdk.models.common.TokenResponse
        """
        params = {
            "expiration": expiration,
            "authorization": coerce_choice(Authorization, authorization, "authorization").value,
        }
        path = f"{self._path(organization, database)}/auth/tokens"
        return self._call("POST", path, TokenResponse, params=params)

    def invalidate_tokens(self, organization: str, database: str) -> None:
        """Invalidate all tokens issued for a database."""
        self._call("POST", f"{self._path(organization, database)}/auth/rotate", None)

    # ------------------------------------------------------------------ dumps

    def upload_dump(self, organization: str, file: DumpSource) -> UploadDumpResponse:
        """Upload a SQL dump to seed a new database with.

        The dump is sent as ``multipart/form-data`` with a single part named ``file``
        carrying the original file name and ``application/octet-stream`` content.
        The returned URL is used with :class:`~turso_sdk.models.database.DumpSeed`.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param file: Path to the dump, or a file object opened in binary mode.
        :type file: :class:`str` or :class:`os.PathLike` or binary file object
        :rtype: ~turso_sdk.models.database.UploadDumpResponse

        :raises ~turso_sdk.core.errors.ValidationError: If the file does not exist or is
            not opened in binary mode.
        """
        filename, content = _read_dump(file)
        files = {"file": (filename, content, DUMP_CONTENT_TYPE)}
        return self._call("POST", f"{self._path(organization)}/dumps", UploadDumpResponse, files=files)
