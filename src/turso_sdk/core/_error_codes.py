# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_404 = "http_404"
HTTP_500 = "http_500"
HTTP_503 = "http_503"


def http_subcode(status_code: int) -> str:
    """Return the ``http_<status>`` subcode for a status code."""
    return f"http_{int(status_code)}"


def is_transient_status(status_code: int) -> bool:
    return 500 <= int(status_code) <= 599


# Validation subcodes
VALIDATION_OWNER_ROLE_NOT_ALLOWED = "validation_owner_role_not_allowed"
VALIDATION_EMPTY_PATH_PARAMETER = "validation_empty_path_parameter"
VALIDATION_INVALID_DUMP_FILE = "validation_invalid_dump_file"
VALIDATION_INVALID_VALUE = "validation_invalid_value"

# Unexpected result subcodes
UNEXPECTED_TRANSPORT_FAILURE = "unexpected_transport_failure"
UNEXPECTED_INVALID_PAYLOAD = "unexpected_invalid_payload"
UNEXPECTED_SCHEMA_MISMATCH = "unexpected_schema_mismatch"
