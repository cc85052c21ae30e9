# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Models shared by several Turso Platform API resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Type, TypeVar

from ..core._error_codes import VALIDATION_INVALID_VALUE
from ..core.errors import ValidationError
from ._base import _ApiModel

_E = TypeVar("_E", bound=Enum)


def coerce_choice(enum_type: Type[_E], value: Any, name: str) -> _E:
    """
    Convert caller input to a member of ``enum_type``.

    :raises ~turso_sdk.core.errors.ValidationError: If ``value`` is not one of the
        enum's values. Raised before any request is sent.
    """
    try:
        return enum_type(value)
    except ValueError:
        allowed = [member.value for member in enum_type]
        raise ValidationError(
            f"Invalid {name} {value!r}; expected one of {allowed}",
            subcode=VALIDATION_INVALID_VALUE,
            details={"parameter": name, "value": str(value), "allowed": allowed},
        ) from None


class Authorization(str, Enum):
    """Authorization level of a database or group token."""

    FULL_ACCESS = "full-access"
    READ_ONLY = "read-only"


@dataclass
class TokenResponse(_ApiModel):
    """
    Result of a database or group token creation.

    :param jwt: The generated token.
    :type jwt: str
    """

    jwt: str


__all__ = ["coerce_choice", "Authorization", "TokenResponse"]
