# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Platform API token operations namespace."""

from __future__ import annotations

from ..models.api_token import (
    CreateApiTokenResponse,
    ListApiTokensResponse,
    RevokeApiTokenResponse,
    ValidateTokenResponse,
)
from ._base import _Operations, _segment

__all__ = ["ApiTokenOperations"]

_API_TOKENS_PATH = "/v1/auth/api-tokens"
_VALIDATE_PATH = "/v1/auth/validate"


class ApiTokenOperations(_Operations):
    """Namespace for Platform API token operations.

    Accessed via ``client.api_tokens``. These paths are not scoped to an organization.

    Example::

        created = client.api_tokens.create("ci-token")
        print(created.token)  # only returned once
        client.api_tokens.revoke("ci-token")
    """

    def create(self, name: str) -> CreateApiTokenResponse:
        """Create a Platform API token.

        :param name: Token name.
        :type name: :class:`str`
        :rtype: ~turso_sdk.models.api_token.CreateApiTokenResponse
        """
        return self._call("POST", f"{_API_TOKENS_PATH}/{_segment(name, 'name')}", CreateApiTokenResponse)

    def validate(self) -> ValidateTokenResponse:
        """Validate the token this client authenticates with."""
        return self._call("GET", _VALIDATE_PATH, ValidateTokenResponse)

    def list(self) -> ListApiTokensResponse:
        return self._call("GET", _API_TOKENS_PATH, ListApiTokensResponse)

    def revoke(self, name: str) -> RevokeApiTokenResponse:
        return self._call("DELETE", f"{_API_TOKENS_PATH}/{_segment(name, 'name')}", RevokeApiTokenResponse)
