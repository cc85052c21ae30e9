# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Organization, member and invite models for the Turso Platform API.

Invites are returned with capitalized wire names (``Accepted``, ``CreatedAt``, ``ID`` ...);
:class:`Invite` maps them to snake_case attributes.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from ..core._error_codes import VALIDATION_OWNER_ROLE_NOT_ALLOWED
from ..core.errors import ValidationError
from ._base import _ApiModel
from .common import coerce_choice


class MemberRole(str, Enum):
    """Role of a member within an organization."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class Organization(_ApiModel):
    """
    Organization metadata.

    :param name: Organization display name.
    :type name: str
    :param slug: Organization slug used in API paths.
    :type slug: str
    :param type: ``"personal"`` or ``"team"``.
    :type type: str
    :param blocked_reads: Whether reads are blocked for the organization.
    :type blocked_reads: bool
    :param blocked_writes: Whether writes are blocked for the organization.
    :type blocked_writes: bool
    :param overages: Whether overages are enabled.
    :type overages: bool
    """

    name: str
    slug: str
    type: str
    blocked_reads: bool = False
    blocked_writes: bool = False
    overages: bool = False


@dataclass
class OrganizationResponse(_ApiModel):
    organization: Organization


@dataclass
class UpdateOrganizationRequest(_ApiModel):
    overages: bool


@dataclass
class Member(_ApiModel):
    username: str
    role: MemberRole
    email: str = ""


@dataclass
class ListMembersResponse(_ApiModel):
    members: List[Member]


@dataclass
class MemberResponse(_ApiModel):
    member: Member


def ensure_assignable_role(role: MemberRole) -> None:
    """
    Reject the organization owner role for new members and invites.

    :raises ~turso_sdk.core.errors.ValidationError: If ``role`` is :attr:`MemberRole.OWNER`.
    """
    if coerce_choice(MemberRole, role, "role") is MemberRole.OWNER:
        raise ValidationError(
            "Owner role is not allowed",
            subcode=VALIDATION_OWNER_ROLE_NOT_ALLOWED,
            details={"role": MemberRole.OWNER.value},
        )


@dataclass
class CreateMember(_ApiModel):
    """
    Request body for adding a member or inviting a user.

    The owner role cannot be granted this way; constructing the request with
    ``MemberRole.OWNER`` raises :class:`~turso_sdk.core.errors.ValidationError`.

    :param username: Username to add, or email address to invite.
    :type username: str
    :param role: Role to grant (``admin`` or ``member``).
    :type role: MemberRole
    """

    username: str
    role: MemberRole = MemberRole.MEMBER

    def __post_init__(self) -> None:
        self.role = coerce_choice(MemberRole, self.role, "role")
        ensure_assignable_role(self.role)


@dataclass
class CreateMemberResponse(_ApiModel):
    member: str
    role: MemberRole


@dataclass
class UpdateMemberRequest(_ApiModel):
    role: MemberRole

    def __post_init__(self) -> None:
        self.role = coerce_choice(MemberRole, self.role, "role")


@dataclass
class DeleteMemberResponse(_ApiModel):
    member: str


@dataclass
class Invite(_ApiModel):
    """
    Pending or accepted invitation to an organization.

    Timestamps are timezone-aware UTC datetimes. ``deleted_at`` is ``None`` when the
    server omits it or sends ``null``.
    """

    _WIRE_NAMES: ClassVar[Dict[str, str]] = {
        "accepted": "Accepted",
        "created_at": "CreatedAt",
        "deleted_at": "DeletedAt",
        "email": "Email",
        "id": "ID",
        "organization": "Organization",
        "organization_id": "OrganizationID",
        "role": "Role",
        "token": "Token",
        "updated_at": "UpdatedAt",
    }

    id: int
    email: str
    role: MemberRole
    accepted: bool
    created_at: _dt.datetime
    updated_at: _dt.datetime
    organization_id: int
    organization: Organization
    token: str = ""
    deleted_at: Optional[_dt.datetime] = None


@dataclass
class ListInvitesResponse(_ApiModel):
    invites: List[Invite]


@dataclass
class CreateInviteResponse(_ApiModel):
    invited: Invite

# ------------------------------------------------------------ billing & usage


@dataclass
class Plan(_ApiModel):
    """
    Subscription plan offered to an organization.

    ``quotas`` is kept as the decoded JSON object since its keys vary by plan.
    """

    name: str
    price: str = ""
    quotas: Dict[str, Any] = field(default_factory=dict)


@dataclass
class OrganizationPlansResponse(_ApiModel):
    plans: List[Plan]


@dataclass
class Subscription(_ApiModel):
    subscription: str
    overages: bool = False
    plan: str = ""
    timeline: str = ""


@dataclass
class SubscriptionResponse(_ApiModel):
    subscription: Subscription


@dataclass
class Invoice(_ApiModel):
    invoice_number: str
    amount_due: str
    due_date: Optional[str] = None
    paid_at: Optional[str] = None
    payment_failed_at: Optional[str] = None
    invoice_pdf: Optional[str] = None


@dataclass
class InvoicesResponse(_ApiModel):
    invoices: List[Invoice]


@dataclass
class OrganizationUsageTotals(_ApiModel):
    rows_read: int = 0
    rows_written: int = 0
    databases: int = 0
    locations: int = 0
    storage_bytes: int = 0
    groups: int = 0
    bytes_synced: int = 0


@dataclass
class OrganizationUsage(_ApiModel):
    uuid: str
    usage: OrganizationUsageTotals
    databases: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class OrganizationUsageResponse(_ApiModel):
    organization: OrganizationUsage


__all__ = [
    "MemberRole",
    "Organization",
    "OrganizationResponse",
    "UpdateOrganizationRequest",
    "Member",
    "ListMembersResponse",
    "MemberResponse",
    "ensure_assignable_role",
    "CreateMember",
    "CreateMemberResponse",
    "UpdateMemberRequest",
    "DeleteMemberResponse",
    "Invite",
    "ListInvitesResponse",
    "CreateInviteResponse",
    "Plan",
    "OrganizationPlansResponse",
    "Subscription",
    "SubscriptionResponse",
    "Invoice",
    "InvoicesResponse",
    "OrganizationUsageTotals",
    "OrganizationUsage",
    "OrganizationUsageResponse",
]
