# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Unit tests for the client.locations and client.api_tokens namespaces."""

import threading

import pytest

from turso_sdk.core.errors import ApiError, UnexpectedResultError

from conftest import BASE_URL
from fixtures.test_data import API_TOKEN, LOCATIONS


class TestLocationOperations:
    def test_list(self, client, adapter):
        adapter.queue((200, LOCATIONS))

        locations = client.locations.list().locations

        assert locations == {"ams": "Amsterdam, Netherlands", "fra": "Frankfurt, Germany"}
        sent = adapter.last_request
        assert sent.method == "GET"
        assert sent.url == f"{BASE_URL}/v1/locations"
        assert sent.headers["Authorization"] == "Bearer test_token_12345"

    def test_list_with_extra_fields(self, client, adapter):
        adapter.queue((200, dict(LOCATIONS, closest="ams")))
        assert len(client.locations.list().locations) == 2

    def test_wrong_shape(self, client, adapter):
        adapter.queue((200, {"locations": ["ams", "fra"]}))
        with pytest.raises(UnexpectedResultError):
            client.locations.list()

    def test_concurrent_calls_share_client(self, client, adapter):
        adapter.queue(*[(200, LOCATIONS)] * 8)
        results = []
        errors = []

        def worker():
            try:
                results.append(client.locations.list())
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(results) == 8
        assert adapter.call_count == 8


class TestApiTokenOperations:
    def test_create(self, client, adapter):
        adapter.queue((200, dict(API_TOKEN, token="secret-jwt")))

        created = client.api_tokens.create("ci")

        assert created.token == "secret-jwt"
        assert adapter.last_request.method == "POST"
        assert adapter.last_request.path_url == "/v1/auth/api-tokens/ci"

    def test_validate(self, client, adapter):
        adapter.queue((200, {"exp": 1700000000}))
        assert client.api_tokens.validate().exp == 1700000000
        assert adapter.last_request.path_url == "/v1/auth/validate"

    def test_validate_invalid_token(self, client, adapter):
        adapter.queue((401, {"error": "token is invalid"}))
        with pytest.raises(ApiError) as exc_info:
            client.api_tokens.validate()
        assert exc_info.value.status_code == 401

    def test_list(self, client, adapter):
        adapter.queue((200, {"tokens": [API_TOKEN]}))
        tokens = client.api_tokens.list().tokens
        assert tokens[0].name == "ci"
        assert adapter.last_request.path_url == "/v1/auth/api-tokens"

    def test_revoke(self, client, adapter):
        adapter.queue((200, {"token": "ci"}))
        assert client.api_tokens.revoke("ci").token == "ci"
        assert adapter.last_request.method == "DELETE"
