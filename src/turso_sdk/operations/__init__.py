# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Operation namespace classes for the Turso Platform API SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- OrganizationOperations, MemberOperations, InviteOperations
- AuditLogOperations
- GroupOperations
- DatabaseOperations, InstanceOperations
- ApiTokenOperations
- LocationOperations
"""

__all__ = []
