# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Data models for the Turso Platform API SDK.

Each module holds the request and response dataclasses of one resource group:

- :mod:`~turso_sdk.models.organization`: organizations, members, invites, billing.
- :mod:`~turso_sdk.models.audit_log`: audit log entries and pagination.
- :mod:`~turso_sdk.models.group`: groups and group creation.
- :mod:`~turso_sdk.models.database`: databases, seeds, configuration, usage, instances.
- :mod:`~turso_sdk.models.api_token`: platform API tokens.
- :mod:`~turso_sdk.models.location`: locations.
- :mod:`~turso_sdk.models.common`: token responses and authorization levels.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from the
    specific module files to avoid duplicate entries in generated documentation.
"""

__all__ = []
