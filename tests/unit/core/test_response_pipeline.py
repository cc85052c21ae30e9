# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Unit tests for the response decoding pipeline.

Tests cover:
- Typed decoding of successful responses (extra fields ignored)
- Reclassification of failed decodes as ApiError via the error envelope
- UnexpectedResultError when neither the expected type nor the envelope matches
- No-content operations and transport failures
"""

from typing import List

import pytest
import requests

from turso_sdk.core._error_codes import (
    HTTP_404,
    HTTP_500,
    UNEXPECTED_INVALID_PAYLOAD,
    UNEXPECTED_SCHEMA_MISMATCH,
    UNEXPECTED_TRANSPORT_FAILURE,
)
from turso_sdk.core._response import _handle_response, _transport_failure
from turso_sdk.core.errors import ApiError, UnexpectedResultError
from turso_sdk.models._base import SchemaError
from turso_sdk.models.location import ListLocationsResponse
from turso_sdk.models.organization import Organization

from conftest import make_response
from fixtures.test_data import ERROR_ENVELOPE, LOCATIONS, MESSAGE_ENVELOPE, ORGANIZATION


class TestSuccessDecoding:
    def test_typed_value_returned(self):
        result = _handle_response(make_response(200, LOCATIONS), ListLocationsResponse)
        assert result.locations == {"ams": "Amsterdam, Netherlands", "fra": "Frankfurt, Germany"}

    def test_extra_fields_ignored(self):
        body = dict(LOCATIONS, extra={"nested": True}, another=1)
        result = _handle_response(make_response(200, body), ListLocationsResponse)
        assert set(result.locations) == {"ams", "fra"}

    def test_bare_list_decoded(self):
        result = _handle_response(make_response(200, [ORGANIZATION]), List[Organization])
        assert len(result) == 1
        assert result[0].slug == "acme"
        assert result[0].overages is True

    def test_no_content_returns_none(self):
        assert _handle_response(make_response(200, b""), None) is None
        assert _handle_response(make_response(204, b""), None) is None

    def test_no_content_ignores_body(self):
        assert _handle_response(make_response(200, {"anything": 1}), None) is None


class TestErrorEnvelope:
    def test_error_key_on_failure_status(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(404, ERROR_ENVELOPE), ListLocationsResponse)
        err = exc_info.value
        assert err.message == "database not found"
        assert err.status_code == 404
        assert err.subcode == HTTP_404
        assert err.is_transient is False
        assert err.source == "server"

    def test_message_key_preferred(self):
        body = {"message": "first", "error": "second"}
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(400, body), ListLocationsResponse)
        assert exc_info.value.message == "first"

    def test_message_key_on_401(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(401, MESSAGE_ENVELOPE), ListLocationsResponse)
        assert exc_info.value.message == "invalid token"

    def test_envelope_on_success_status_with_wrong_shape(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(200, ERROR_ENVELOPE), ListLocationsResponse)
        err = exc_info.value
        assert err.status_code == 200
        assert err.subcode is None
        assert isinstance(err.__cause__, SchemaError)

    def test_server_error_envelope_transient(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(500, {"error": "internal"}), ListLocationsResponse)
        assert exc_info.value.subcode == HTTP_500
        assert exc_info.value.is_transient is True

    def test_no_content_failure_status_uses_envelope(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(404, {"error": "invite not found"}), None)
        assert exc_info.value.message == "invite not found"

    def test_body_excerpt_recorded(self):
        with pytest.raises(ApiError) as exc_info:
            _handle_response(make_response(404, ERROR_ENVELOPE), ListLocationsResponse)
        assert "database not found" in exc_info.value.details["body_excerpt"]


class TestUnexpectedResult:
    def test_shape_mismatch_without_envelope(self):
        with pytest.raises(UnexpectedResultError) as exc_info:
            _handle_response(make_response(200, {"unrelated": 1}), ListLocationsResponse)
        err = exc_info.value
        assert err.subcode == UNEXPECTED_SCHEMA_MISMATCH
        assert err.status_code == 200
        assert isinstance(err.__cause__, SchemaError)

    def test_non_json_body(self):
        with pytest.raises(UnexpectedResultError) as exc_info:
            _handle_response(make_response(502, "<html>Bad gateway</html>"), ListLocationsResponse)
        err = exc_info.value
        assert err.subcode == UNEXPECTED_INVALID_PAYLOAD
        assert err.is_transient is True

    def test_empty_body(self):
        with pytest.raises(UnexpectedResultError):
            _handle_response(make_response(200, b""), ListLocationsResponse)

    def test_envelope_with_non_string_message(self):
        with pytest.raises(UnexpectedResultError):
            _handle_response(make_response(400, {"error": {"code": 1}}), ListLocationsResponse)

    def test_no_content_failure_without_envelope(self):
        with pytest.raises(UnexpectedResultError) as exc_info:
            _handle_response(make_response(404, b""), None)
        assert exc_info.value.status_code == 404

    def test_classification_is_idempotent(self):
        response = make_response(200, {"unrelated": 1})
        outcomes = []
        for _ in range(2):
            with pytest.raises(UnexpectedResultError) as exc_info:
                _handle_response(response, ListLocationsResponse)
            outcomes.append((exc_info.value.subcode, exc_info.value.message))
        assert outcomes[0] == outcomes[1]


class TestTransportFailure:
    def test_wraps_request_exception(self):
        err = _transport_failure(requests.exceptions.ConnectTimeout("timed out"))
        assert isinstance(err, UnexpectedResultError)
        assert err.subcode == UNEXPECTED_TRANSPORT_FAILURE
        assert err.status_code is None
        assert err.source == "client"
        assert err.is_transient is True

    def test_transport_failure_through_client(self, client, adapter):
        adapter.queue(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(UnexpectedResultError) as exc_info:
            client.locations.list()
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)
