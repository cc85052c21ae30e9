# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Unit tests for the dataclass schema codec in turso_sdk.models._base."""

import datetime as dt
from typing import Dict, List, Optional

import pytest

from turso_sdk.models._base import (
    SchemaError,
    _CodecOptions,
    decode_value,
    encode_value,
    format_timestamp,
    parse_timestamp,
)
from turso_sdk.models.api_token import ValidateTokenResponse
from turso_sdk.models.audit_log import ListAuditLogsResponse
from turso_sdk.models.database import (
    ConfigurationResponse,
    CreateDatabase,
    CreateDatabaseResponse,
    Database,
    DatabaseSeed,
    DumpSeed,
    StatsResponse,
)
from turso_sdk.models.group import CreateGroup, LibSqlExtension
from turso_sdk.models.organization import Invite, Member, MemberRole

from fixtures.test_data import AUDIT_LOGS, CREATED_DATABASE, DATABASE, INVITE, MEMBER

UTC = dt.timezone.utc


class TestTimestamps:
    def test_z_suffix(self):
        assert parse_timestamp("2023-12-20T09:46:08Z") == dt.datetime(2023, 12, 20, 9, 46, 8, tzinfo=UTC)

    def test_nanoseconds_truncated(self):
        parsed = parse_timestamp("2023-01-02T08:30:00.123456789Z")
        assert parsed.microsecond == 123456

    def test_short_fraction_padded(self):
        assert parse_timestamp("2023-01-02T08:30:00.5Z").microsecond == 500000

    def test_naive_value_taken_as_utc(self):
        assert parse_timestamp("2023-01-02T08:30:00").tzinfo == UTC

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2023-01-02T10:30:00+02:00")
        assert parsed == dt.datetime(2023, 1, 2, 8, 30, tzinfo=UTC)

    def test_invalid_timestamp(self):
        with pytest.raises(SchemaError):
            parse_timestamp("yesterday")

    def test_format_uses_z(self):
        assert format_timestamp(dt.datetime(2024, 5, 1, 12, 0, tzinfo=UTC)) == "2024-05-01T12:00:00Z"
        assert format_timestamp(dt.datetime(2024, 5, 1, 12, 0)) == "2024-05-01T12:00:00Z"


class TestDecoding:
    def test_database_wire_names(self):
        db = Database.from_api_response(DATABASE)
        assert db.name == "db1"
        assert db.db_id == "0eb771dd-6906-11ee-8553-eaa7715aeaf2"
        assert db.hostname == "db1-acme.turso.io"
        assert db.primary_region == "ams"
        assert db.regions == ["ams", "fra"]
        assert db.schema is None

    def test_database_optional_flags_default(self):
        db = Database.from_api_response({"Name": "a", "DbId": "b", "Hostname": "c"})
        assert db.block_reads is False
        assert db.regions == []

    def test_missing_required_field(self):
        with pytest.raises(SchemaError) as exc_info:
            Database.from_api_response({"Name": "a", "Hostname": "c"})
        assert "DbId" in str(exc_info.value)

    def test_created_database(self):
        created = CreateDatabaseResponse.from_api_response(CREATED_DATABASE)
        assert created.database.db_id == "0eb771dd-6906-11ee-8553-eaa7715aeaf2"
        assert created.database.issued_cert_limit == 0
        assert created.username == "db2"
        assert created.password == ""

    def test_invite_capitalized_fields(self):
        invite = Invite.from_api_response(INVITE)
        assert invite.id == 7
        assert invite.role is MemberRole.MEMBER
        assert invite.created_at == dt.datetime(2023, 1, 1, tzinfo=UTC)
        assert invite.deleted_at is None
        assert invite.organization.slug == "acme"

    def test_enum_case_insensitive(self):
        member = Member.from_api_response(dict(MEMBER, role="ADMIN"))
        assert member.role is MemberRole.ADMIN

    def test_invalid_enum(self):
        with pytest.raises(SchemaError):
            Member.from_api_response(dict(MEMBER, role="superuser"))

    def test_audit_log_any_data(self):
        logs = ListAuditLogsResponse.from_api_response(AUDIT_LOGS)
        assert logs.audit_logs[0].data == {"name": "db1"}
        assert logs.pagination.total_rows == 1

    def test_lenient_numbers_and_booleans(self):
        config = ConfigurationResponse.from_api_response({"size_limit": 256, "block_reads": "true"})
        assert config.size_limit == "256"
        assert config.block_reads is True
        token = ValidateTokenResponse.from_api_response({"exp": "1700000000"})
        assert token.exp == 1700000000

    def test_strict_numbers_when_not_lenient(self):
        with pytest.raises(SchemaError):
            ValidateTokenResponse.from_api_response({"exp": "1700000000"}, _CodecOptions(lenient=False))

    def test_unknown_keys_rejected_when_configured(self):
        with pytest.raises(SchemaError):
            ValidateTokenResponse.from_api_response({"exp": 1, "extra": 2}, _CodecOptions(ignore_unknown_keys=False))

    def test_nullable_list(self):
        assert StatsResponse.from_api_response({"top_queries": None}).top_queries is None
        assert StatsResponse.from_api_response({}).top_queries is None

    def test_generic_containers(self):
        assert decode_value(Dict[str, int], {"a": "1"}) == {"a": 1}
        assert decode_value(List[Optional[str]], ["a", None]) == ["a", None]

    def test_bool_is_not_int(self):
        with pytest.raises(SchemaError):
            decode_value(int, True)

    def test_null_for_required_field(self):
        with pytest.raises(SchemaError):
            Member.from_api_response(dict(MEMBER, username=None))


class TestEncoding:
    def test_create_database_encodes_every_field(self):
        payload = CreateDatabase(name="db1", group="default").to_api_payload()
        assert payload == {
            "name": "db1",
            "group": "default",
            "is_schema": False,
            "schema": None,
            "seed": None,
            "size_limit": None,
        }

    def test_defaults_skipped_when_configured(self):
        payload = CreateDatabase(name="db1", group="default").to_api_payload(_CodecOptions(encode_defaults=False))
        assert payload == {"name": "db1", "group": "default"}

    def test_database_seed(self):
        seed = DatabaseSeed(name="db1", timestamp=dt.datetime(2024, 1, 1, tzinfo=UTC))
        assert encode_value(seed) == {"name": "db1", "timestamp": "2024-01-01T00:00:00Z", "type": "database"}

    def test_dump_seed(self):
        assert encode_value(DumpSeed(url="https://dumps.example/1")) == {
            "url": "https://dumps.example/1",
            "type": "dump",
        }

    def test_extensions_enum_values(self):
        group = CreateGroup(name="g", location="ams", extensions=[LibSqlExtension.VECTOR, LibSqlExtension.UUID])
        assert group.to_api_payload()["extensions"] == ["vector", "uuid"]

    def test_wire_names_used(self):
        payload = Database(name="a", db_id="b", hostname="c").to_api_payload()
        assert payload["Name"] == "a"
        assert payload["DbId"] == "b"
        assert payload["primaryRegion"] == ""
