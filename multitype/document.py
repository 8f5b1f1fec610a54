"""Embed :class:`~multitype.boolstring.BoolOrString` fields in documents.

A document is any :func:`dataclasses.dataclass`. Its fields are written out
in declaration order and optional fields are dropped according to the
:class:`Omit` policy stored in the field metadata.

Examples
--------
>>> @dataclasses.dataclass
... class Settings:
...     string: str = omittable(default="")
...     multi: BoolOrString | None = omittable()
>>> to_mapping(Settings(string="string", multi=BoolOrString.from_bool(False)))
{'string': 'string'}
>>> settings = Settings(string="string", multi=BoolOrString.from_string("false"))
>>> list(to_mapping(settings))
['string', 'multi']
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import types
import typing as typ

from .boolstring import BoolOrString
from .errors import DecodeError

T = typ.TypeVar("T")

__all__ = ["Omit", "from_mapping", "is_omitted", "omittable", "to_mapping"]

logger = logging.getLogger(__name__)

OMIT_KEY = "omit"
NAME_KEY = "key"
_ZERO_VALUE_TYPES = (bool, int, float, str, list, tuple, dict)


class Omit(enum.StrEnum):
    """Policy deciding when a field is left out of an encoded document."""

    EMPTY = "empty"
    NONE = "none"
    NEVER = "never"


def omittable(
    *,
    default: object = None,
    omit: Omit = Omit.EMPTY,
    key: str | None = None,
) -> typ.Any:  # noqa: ANN401
    """Declare an optional document field.

    Parameters
    ----------
    default
        Value used when the field is absent from decoded input.
    omit
        When to leave the field out of encoded output.
    key
        Name used in encoded documents, when it differs from the attribute.

    Under :attr:`Omit.EMPTY` a value is empty when it is ``None``, an empty
    :class:`BoolOrString`, ``False``, zero, or an empty string, list, tuple or
    dict.
    """
    metadata: dict[str, object] = {OMIT_KEY: omit}
    if key is not None:
        metadata[NAME_KEY] = key
    return dataclasses.field(default=default, metadata=metadata)


def is_omitted(value: object, policy: Omit) -> bool:
    """Return ``True`` when ``value`` should be left out under ``policy``."""
    if policy is Omit.NEVER:
        return False
    if value is None:
        return True
    if policy is Omit.NONE:
        return False
    if isinstance(value, BoolOrString):
        return value.is_empty()
    if isinstance(value, _ZERO_VALUE_TYPES):
        return not value
    return False


def _key(field: dataclasses.Field[typ.Any]) -> str:
    return field.metadata.get(NAME_KEY, field.name)


def _require_dataclass(obj: object) -> None:
    if not dataclasses.is_dataclass(obj):
        msg = f"{obj!r} is not a dataclass"
        raise TypeError(msg)


def to_mapping(document: object) -> dict[str, object]:
    """Return the fields of ``document`` that survive omission.

    :class:`BoolOrString` values are returned as-is; the format adapters know
    how to encode them.
    """
    _require_dataclass(document)
    mapping: dict[str, object] = {}
    for field in dataclasses.fields(typ.cast("typ.Any", document)):
        value = getattr(document, field.name)
        if is_omitted(value, field.metadata.get(OMIT_KEY, Omit.EMPTY)):
            continue
        mapping[_key(field)] = value
    return mapping


def _holds_bool_or_string(hint: object) -> tuple[bool, bool]:
    """Return whether ``hint`` names BoolOrString and whether it allows None."""
    if hint is BoolOrString:
        return True, False
    if isinstance(hint, types.UnionType) or typ.get_origin(hint) is typ.Union:
        args = typ.get_args(hint)
        return BoolOrString in args, type(None) in args
    return False, False


def _decode_field(name: str, hint: object, token: object) -> object:
    is_multi, nullable = _holds_bool_or_string(hint)
    if not is_multi:
        return token
    if token is None and nullable:
        return None
    return BoolOrString.from_native(token, field=name)


def _is_required(field: dataclasses.Field[typ.Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING
    )


def from_mapping(document_type: type[T], data: object) -> T:
    """Build a ``document_type`` instance from decoded ``data``.

    Keys without a matching field are ignored. Missing keys keep the field
    default. Only BoolOrString fields are validated; other fields receive the
    decoded token unchanged.

    Raises
    ------
    DecodeError
        If ``data`` is not a mapping, a key for a field without a default is
        missing, or a BoolOrString field holds a token of an
        unsupported type.
    """
    _require_dataclass(document_type)
    if not isinstance(data, dict):
        msg = f"document must be a mapping, got {type(data).__name__}"
        raise DecodeError(msg)

    hints = typ.get_type_hints(document_type)
    fields = {
        _key(field): field
        for field in dataclasses.fields(typ.cast("typ.Any", document_type))
        if field.init
    }
    kwargs: dict[str, object] = {}
    for key, token in data.items():
        field = fields.get(key)
        if field is None:
            logger.debug("Ignoring unknown key %r for %s", key, document_type.__name__)
            continue
        kwargs[field.name] = _decode_field(key, hints[field.name], token)
    for key, field in fields.items():
        if field.name not in kwargs and _is_required(field):
            msg = f"missing required key {key!r}"
            raise DecodeError(msg, field=key)
    return document_type(**kwargs)
