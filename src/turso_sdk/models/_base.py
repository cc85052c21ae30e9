# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""
Schema codec shared by all Turso Platform API models.

Models are plain dataclasses deriving from :class:`_ApiModel`. Attribute names are
idiomatic snake_case; where the wire name differs (``DbId``, ``primaryRegion``,
``CreatedAt`` ...) the model lists it in its ``_WIRE_NAMES`` mapping table. Decoding and
encoding are driven by the dataclass fields and their type hints, and behave according
to the :class:`_CodecOptions` handed in by the client.
"""

from __future__ import annotations

import dataclasses
import datetime as _dt
import functools
import re
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Union


class SchemaError(ValueError):
    """Raised when a payload does not conform to the expected schema."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{message} at {path}")
        self.path = path


@dataclass(frozen=True)
class _CodecOptions:
    """
    JSON codec configuration.

    :param ignore_unknown_keys: Ignore response fields the model does not declare.
    :type ignore_unknown_keys: bool
    :param encode_defaults: Encode fields still holding their default value (``None`` as ``null``).
    :type encode_defaults: bool
    :param lenient: Accept numeric strings for numbers, ``"true"``/``"false"`` for booleans
        and numbers for strings.
    :type lenient: bool
    """

    ignore_unknown_keys: bool = True
    encode_defaults: bool = True
    lenient: bool = True


DEFAULT_CODEC = _CodecOptions()

_NONE_TYPE = type(None)
_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)
_TIME_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


class _ApiModel:
    """Base class for dataclass models exchanged with the Platform API."""

    # attribute name -> wire name, only for names that differ
    _WIRE_NAMES: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_api_response(cls, data: Any, options: _CodecOptions = DEFAULT_CODEC):
        """
        Build an instance from a decoded JSON payload.

        :raises SchemaError: If the payload does not match the model.
        """
        return decode_value(cls, data, options)

    def to_api_payload(self, options: _CodecOptions = DEFAULT_CODEC) -> Dict[str, Any]:
        """Encode the instance as a JSON-compatible dictionary using wire names."""
        return encode_value(self, options)


# ----------------------------------------------------------------- timestamps


def parse_timestamp(value: Any, path: str = "$") -> _dt.datetime:
    """
    Parse an ISO-8601 timestamp into a timezone-aware UTC datetime.

    Naive values are assumed to be UTC. A trailing ``Z`` and fractional seconds of any
    precision are accepted; precision beyond microseconds is truncated.
    """
    if isinstance(value, _dt.datetime):
        parsed = value
    else:
        if not isinstance(value, str):
            raise SchemaError(f"expected timestamp string, got {type(value).__name__}", path)
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        text = _TIME_FRACTION.sub(lambda m: f"{m.group(1)}.{(m.group(2) + '000000')[:6]}", text)
        try:
            parsed = _dt.datetime.fromisoformat(text)
        except ValueError:
            raise SchemaError(f"invalid timestamp {value!r}", path) from None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=_dt.timezone.utc)
    return parsed.astimezone(_dt.timezone.utc)


def format_timestamp(value: _dt.datetime) -> str:
    """Format a datetime as UTC ISO-8601 with a ``Z`` suffix (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=_dt.timezone.utc)
    return value.astimezone(_dt.timezone.utc).isoformat().replace("+00:00", "Z")


# ------------------------------------------------------------------- decoding


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _decode_bool(value: Any, options: _CodecOptions, path: str) -> bool:
    if isinstance(value, bool):
        return value
    if options.lenient and isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise SchemaError(f"expected boolean, got {value!r}", path)


def _decode_int(value: Any, options: _CodecOptions, path: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if options.lenient:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
    raise SchemaError(f"expected integer, got {value!r}", path)


def _decode_float(value: Any, options: _CodecOptions, path: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if options.lenient and isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise SchemaError(f"expected number, got {value!r}", path)


def _decode_str(value: Any, options: _CodecOptions, path: str) -> str:
    if isinstance(value, str):
        return value
    if options.lenient and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise SchemaError(f"expected string, got {value!r}", path)


def _decode_enum(tp: type, value: Any, path: str) -> Enum:
    try:
        return tp(value)
    except ValueError:
        pass
    if isinstance(value, str):
        for member in tp:
            if isinstance(member.value, str) and member.value.lower() == value.lower():
                return member
    raise SchemaError(f"invalid {tp.__name__} value {value!r}", path)


def _decode_model(tp: type, value: Any, options: _CodecOptions, path: str) -> Any:
    if not isinstance(value, dict):
        raise SchemaError(f"expected object for {tp.__name__}, got {type(value).__name__}", path)
    hints = _type_hints(tp)
    wire_names = getattr(tp, "_WIRE_NAMES", {})
    kwargs: Dict[str, Any] = {}
    known = set()
    for f in dataclasses.fields(tp):
        wire = wire_names.get(f.name, f.name)
        known.add(wire)
        if not f.init:
            continue
        hint = hints[f.name]
        if wire in value:
            kwargs[f.name] = decode_value(hint, value[wire], options, f"{path}.{wire}")
        elif f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
            continue
        elif _is_optional(hint):
            kwargs[f.name] = None
        else:
            raise SchemaError(f"missing required field {wire!r}", path)
    if not options.ignore_unknown_keys:
        unknown = sorted(set(value) - known)
        if unknown:
            raise SchemaError(f"unknown fields {unknown}", path)
    try:
        return tp(**kwargs)
    except (TypeError, ValueError) as exc:
        raise SchemaError(str(exc), path) from exc


def _is_optional(hint: Any) -> bool:
    return typing.get_origin(hint) in _UNION_TYPES and _NONE_TYPE in typing.get_args(hint)


def decode_value(tp: Any, value: Any, options: _CodecOptions = DEFAULT_CODEC, path: str = "$") -> Any:
    """
    Convert a decoded JSON value into ``tp``.

    Supported targets: ``_ApiModel`` dataclasses, ``List[...]``, ``Dict[str, ...]``,
    ``Optional[...]``, enums, ``datetime``, ``bool``, ``int``, ``float``, ``str`` and ``Any``.

    :raises SchemaError: If ``value`` cannot be represented as ``tp``.
    """
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin in _UNION_TYPES:
        args = typing.get_args(tp)
        if value is None:
            if _NONE_TYPE in args:
                return None
            raise SchemaError("unexpected null", path)
        errors: List[SchemaError] = []
        for arg in args:
            if arg is _NONE_TYPE:
                continue
            try:
                return decode_value(arg, value, options, path)
            except SchemaError as exc:
                errors.append(exc)
        raise errors[0]

    if value is None:
        raise SchemaError("unexpected null", path)

    if origin in (list, List):
        if not isinstance(value, list):
            raise SchemaError(f"expected array, got {type(value).__name__}", path)
        (item_type,) = typing.get_args(tp) or (Any,)
        return [decode_value(item_type, item, options, f"{path}[{i}]") for i, item in enumerate(value)]

    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise SchemaError(f"expected object, got {type(value).__name__}", path)
        _, value_type = typing.get_args(tp) or (str, Any)
        return {str(k): decode_value(value_type, v, options, f"{path}.{k}") for k, v in value.items()}

    if isinstance(tp, type):
        if issubclass(tp, _ApiModel):
            return _decode_model(tp, value, options, path)
        if issubclass(tp, Enum):
            return _decode_enum(tp, value, path)
        if issubclass(tp, _dt.datetime):
            return parse_timestamp(value, path)
        if tp is bool:
            return _decode_bool(value, options, path)
        if tp is int:
            return _decode_int(value, options, path)
        if tp is float:
            return _decode_float(value, options, path)
        if tp is str:
            return _decode_str(value, options, path)

    raise TypeError(f"Unsupported schema type: {tp!r}")


# ------------------------------------------------------------------- encoding


def encode_value(value: Any, options: _CodecOptions = DEFAULT_CODEC) -> Any:
    """Encode models, enums, datetimes and containers into JSON-compatible values."""
    if isinstance(value, _ApiModel) and dataclasses.is_dataclass(value):
        wire_names = getattr(type(value), "_WIRE_NAMES", {})
        payload: Dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if not options.encode_defaults and _holds_default(f, item):
                continue
            payload[wire_names.get(f.name, f.name)] = encode_value(item, options)
        return payload
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, _dt.datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(v, options) for v in value]
    if isinstance(value, dict):
        return {str(k): encode_value(v, options) for k, v in value.items()}
    return value


def _holds_default(f: dataclasses.Field, item: Any) -> bool:
    if f.default is not dataclasses.MISSING:
        return item == f.default
    if f.default_factory is not dataclasses.MISSING:
        return item == f.default_factory()
    return False


__all__ = [
    "SchemaError",
    "_CodecOptions",
    "DEFAULT_CODEC",
    "_ApiModel",
    "decode_value",
    "encode_value",
    "parse_timestamp",
    "format_timestamp",
]
