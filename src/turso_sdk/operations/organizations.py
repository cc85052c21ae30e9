# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Organization, member, invite and audit log operation namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..models.audit_log import ListAuditLogsResponse
from ..models.organization import (
    CreateInviteResponse,
    CreateMember,
    CreateMemberResponse,
    DeleteMemberResponse,
    InvoicesResponse,
    ListInvitesResponse,
    ListMembersResponse,
    MemberResponse,
    Organization,
    OrganizationPlansResponse,
    OrganizationResponse,
    OrganizationUsageResponse,
    SubscriptionResponse,
    UpdateMemberRequest,
    UpdateOrganizationRequest,
    ensure_assignable_role,
)
from ._base import _Operations, _segment

if TYPE_CHECKING:
    from .audit_logs import AuditLogOperations


__all__ = ["OrganizationOperations", "MemberOperations", "InviteOperations"]

_ORGANIZATIONS_PATH = "/v1/organizations"


def _organization_path(organization: str) -> str:
    return f"{_ORGANIZATIONS_PATH}/{_segment(organization, 'organization')}"


class OrganizationOperations(_Operations):
    """Namespace for organization operations.

    Accessed via ``client.organizations``. The member, invite and audit log
    namespaces are also reachable from here.

    Example::

        with TursoClient.using("token") as client:
            for org in client.organizations.list():
                print(org.slug)

            client.organizations.update("my-org", UpdateOrganizationRequest(overages=True))
            members = client.organizations.members.list("my-org")
    """

    @property
    def members(self) -> MemberOperations:
        return self._client.members

    @property
    def invites(self) -> InviteOperations:
        return self._client.invites

    @property
    def audit_logs(self) -> AuditLogOperations:
        return self._client.audit_logs

    def list(self) -> List[Organization]:
        """List organizations the token's user belongs to.

        :return: Organizations (the endpoint returns a bare JSON array).
        :rtype: :class:`list` of :class:`~turso_sdk.models.organization.Organization`
        """
        return self._call("GET", _ORGANIZATIONS_PATH, List[Organization])

    def retrieve(self, organization: str) -> OrganizationResponse:
        """Retrieve an organization by slug.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :rtype: ~turso_sdk.models.organization.OrganizationResponse
        """
        return self._call("GET", _organization_path(organization), OrganizationResponse)

    def update(self, organization: str, changes: UpdateOrganizationRequest) -> OrganizationResponse:
        """Update an organization's settings.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param changes: Settings to apply.
        :type changes: ~turso_sdk.models.organization.UpdateOrganizationRequest
        :rtype: ~turso_sdk.models.organization.OrganizationResponse
        """
        return self._call("PATCH", _organization_path(organization), OrganizationResponse, body=changes)

    def usage(self, organization: str) -> OrganizationUsageResponse:
        """Retrieve usage for the current billing period.

        .. note::
            Not every API deployment serves this endpoint; an unavailable endpoint is
            reported like any other failure, usually as :class:`~turso_sdk.core.errors.ApiError`.
        """
        return self._call("GET", f"{_organization_path(organization)}/usage", OrganizationUsageResponse)

    def plans(self, organization: str) -> OrganizationPlansResponse:
        """List the subscription plans available to an organization."""
        return self._call("GET", f"{_organization_path(organization)}/plans", OrganizationPlansResponse)

    def subscription(self, organization: str) -> SubscriptionResponse:
        """Retrieve the organization's current subscription."""
        return self._call("GET", f"{_organization_path(organization)}/subscription", SubscriptionResponse)

    def list_invoices(self, organization: str) -> InvoicesResponse:
        return self._call("GET", f"{_organization_path(organization)}/invoices", InvoicesResponse)


class MemberOperations(_Operations):
    """Namespace for organization member operations.

    Accessed via ``client.members`` or ``client.organizations.members``.
    """

    @staticmethod
    def _path(organization: str, username: Optional[str] = None) -> str:
        path = f"{_organization_path(organization)}/members"
        if username is not None:
            path += f"/{_segment(username, 'username')}"
        return path

    def list(self, organization: str) -> ListMembersResponse:
        return self._call("GET", self._path(organization), ListMembersResponse)

    def retrieve(self, organization: str, username: str) -> MemberResponse:
        return self._call("GET", self._path(organization, username), MemberResponse)

    def add(self, organization: str, member: CreateMember) -> CreateMemberResponse:
        """Add an existing user to an organization.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param member: Username and role to grant.
        :type member: ~turso_sdk.models.organization.CreateMember
        :rtype: ~turso_sdk.models.organization.CreateMemberResponse

        :raises ~turso_sdk.core.errors.ValidationError: If the requested role is ``owner``.
            No request is sent in that case.
        """
        ensure_assignable_role(member.role)
        return self._call("POST", self._path(organization), CreateMemberResponse, body=member)

    def update(self, organization: str, username: str, changes: UpdateMemberRequest) -> MemberResponse:
        """Change the role of an organization member."""
        return self._call("PATCH", self._path(organization, username), MemberResponse, body=changes)

    def remove(self, organization: str, username: str) -> DeleteMemberResponse:
        return self._call("DELETE", self._path(organization, username), DeleteMemberResponse)


class InviteOperations(_Operations):
    """Namespace for organization invite operations.

    Accessed via ``client.invites`` or ``client.organizations.invites``.
    """

    @staticmethod
    def _path(organization: str, email: Optional[str] = None) -> str:
        path = f"{_organization_path(organization)}/invites"
        if email is not None:
            path += f"/{_segment(email, 'email')}"
        return path

    def list(self, organization: str) -> ListInvitesResponse:
        return self._call("GET", self._path(organization), ListInvitesResponse)

    def create(self, organization: str, invite: CreateMember) -> CreateInviteResponse:
        """Invite a user, by email, to an organization.

        :param organization: Organization slug.
        :type organization: :class:`str`
        :param invite: Email address (as ``username``) and role.
        :type invite: ~turso_sdk.models.organization.CreateMember
        :rtype: ~turso_sdk.models.organization.CreateInviteResponse

        :raises ~turso_sdk.core.errors.ValidationError: If the requested role is ``owner``.
            No request is sent in that case.
        """
        ensure_assignable_role(invite.role)
        return self._call("POST", self._path(organization), CreateInviteResponse, body=invite)

    def delete(self, organization: str, email: str) -> None:
        """Delete a pending invite. The endpoint returns no content."""
        self._call("DELETE", self._path(organization, email), None)
