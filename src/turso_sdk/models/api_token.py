# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Platform API token models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ._base import _ApiModel


@dataclass
class ApiToken(_ApiModel):
    id: str
    name: str


@dataclass
class CreateApiTokenResponse(_ApiModel):
    """
    Result of a Platform API token creation.

    :param id: Token identifier.
    :type id: str
    :param name: Token name.
    :type name: str
    :param token: The token value. Only returned once, at creation time.
    :type token: str
    """

    id: str
    name: str
    token: str


@dataclass
class ValidateTokenResponse(_ApiModel):
    """
    Result of validating the current token.

    :param exp: Expiration time as a Unix timestamp, ``-1`` for tokens that never expire.
    :type exp: int
    """

    exp: int


@dataclass
class ListApiTokensResponse(_ApiModel):
    tokens: List[ApiToken]


@dataclass
class RevokeApiTokenResponse(_ApiModel):
    token: str


__all__ = [
    "ApiToken",
    "CreateApiTokenResponse",
    "ValidateTokenResponse",
    "ListApiTokensResponse",
    "RevokeApiTokenResponse",
]
