# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Group operations namespace."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..models.common import Authorization, TokenResponse, coerce_choice
from ..models.group import CreateGroup, GroupResponse, ListGroupsResponse, TransferGroupRequest
from ._base import _Operations, _segment

__all__ = ["GroupOperations"]

# Group retrieval may wait on a cold group; allow longer than the client default.
RETRIEVE_TIMEOUT = 60.0


def _token_params(expiration: Optional[str], authorization: Optional[Union[Authorization, str]]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if expiration is not None:
        params["expiration"] = expiration
    if authorization is not None:
        params["authorization"] = coerce_choice(Authorization, authorization, "authorization").value
    return params


class GroupOperations(_Operations):
    """Namespace for group operations.

    Accessed via ``client.groups``.

    Example::

        client.groups.create("my-org", CreateGroup(name="default", location="ams"))
        client.groups.add_location("my-org", "default", "fra")
        token = client.groups.create_token("my-org", "default", expiration="2w").jwt
        client.groups.delete("my-org", "default")
    """

    @staticmethod
    def _path(organization: str, group: Optional[str] = None) -> str:
        path = f"/v1/organizations/{_segment(organization, 'organization')}/groups"
        if group is not None:
            path += f"/{_segment(group, 'group')}"
        return path

    # ------------------------------------------------------------------- list

    def list(self, organization: str) -> ListGroupsResponse:
        return self._call("GET", self._path(organization), ListGroupsResponse)

    # --------------------------------------------------------------- retrieve

    def retrieve(self, organization: str, group: str, *, timeout: float = RETRIEVE_TIMEOUT) -> GroupResponse:
        """Retrieve a group.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param group: Group name.
        :type group: :class:`str`
        :param timeout: Request timeout in seconds (default 60).
        :type timeout: :class:`float`
        :rtype: ~turso_sdk.models.group.GroupResponse
        """
        return self._call("GET", self._path(organization, group), GroupResponse, timeout=timeout)

    # ----------------------------------------------------------------- create

    def create(self, organization: str, group: CreateGroup) -> GroupResponse:
        """Create a group in a primary location.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param group: Group name, primary location and optional extensions.
        :type group: ~turso_sdk.models.group.CreateGroup
        :rtype: ~turso_sdk.models.group.GroupResponse
        """
        return self._call("POST", self._path(organization), GroupResponse, body=group)

    def delete(self, organization: str, group: str) -> GroupResponse:
        """Delete a group and all databases in it."""
        return self._call("DELETE", self._path(organization, group), GroupResponse)

    def transfer(self, group: str, from_organization: str, to_organization: str) -> GroupResponse:
        """Transfer a group, with its databases, to another organization.

        :param group: Group name.
        :type group: :class:`str`
        :param from_organization: Slug of the organization owning the group.
        :type from_organization: :class:`str`
        :param to_organization: Slug of the receiving organization.
        :type to_organization: :class:`str`
        :rtype: ~turso_sdk.models.group.GroupResponse
        """
        path = f"{self._path(from_organization, group)}/transfer"
        return self._call("POST", path, GroupResponse, body=TransferGroupRequest(organization=to_organization))

    # -------------------------------------------------------------- locations

    def add_location(self, organization: str, group: str, location: str) -> GroupResponse:
        """Replicate a group to an additional location."""
        path = f"{self._path(organization, group)}/locations/{_segment(location, 'location')}"
        return self._call("POST", path, GroupResponse)

    def remove_location(self, organization: str, group: str, location: str) -> GroupResponse:
        path = f"{self._path(organization, group)}/locations/{_segment(location, 'location')}"
        return self._call("DELETE", path, GroupResponse)

    # ------------------------------------------------------------ maintenance

    def update_version(self, organization: str, group: str) -> None:
        """Update all databases in the group to the latest libSQL version."""
        self._call("POST", f"{self._path(organization, group)}/update", None)

    def unarchive(self, organization: str, group: str) -> GroupResponse:
        """Unarchive a group that was archived due to inactivity."""
        return self._call("POST", f"{self._path(organization, group)}/unarchive", GroupResponse)

    # ----------------------------------------------------------------- tokens

    def create_token(
        self,
        organization: str,
        group: str,
        *,
        expiration: Optional[str] = None,
        authorization: Optional[Union[Authorization, str]] = None,
    ) -> TokenResponse:
        """Create a token valid for every database in the group.

        :param expiration: Lifetime such as ``"2w1d30m"``; server default (``"never"``) when omitted.
        :type expiration: :class:`str` or None
        :param authorization: ``full-access`` or ``read-only``; server default when omitted.
        :type authorization: ~turso_sdk.models.common.Authorization or None
        :rtype: ~turso_sdk.models.common.TokenResponse
        """
        params = _token_params(expiration, authorization)
        path = f"{self._path(organization, group)}/auth/tokens"
        return self._call("POST", path, TokenResponse, params=params or None)

    def invalidate_tokens(self, organization: str, group: str) -> None:
        """Invalidate all tokens issued for the group."""
        self._call("POST", f"{self._path(organization, group)}/auth/rotate", None)
