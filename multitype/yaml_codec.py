"""YAML adapter for :class:`~multitype.boolstring.BoolOrString`.

YAML tells booleans and strings apart by quoting: ``true`` is a boolean and
``"true"`` is a string. Bool-kind values are written bare and String-kind
values are always written double-quoted, so decoding the output gives back
the same kind.
"""

from __future__ import annotations

import typing as typ

import yaml

from .boolstring import BoolOrString, Kind
from .document import from_mapping, to_mapping
from .errors import DecodeError

__all__ = ["decode", "dump", "encode", "load"]

T = typ.TypeVar("T")

_STR_TAG = "tag:yaml.org,2002:str"
_NO_WRAP = float("inf")


def _represent_bool_or_string(
    dumper: yaml.SafeDumper, data: BoolOrString
) -> yaml.ScalarNode:
    if data.resolved_kind is Kind.BOOL:
        return dumper.represent_bool(data.bool_value)
    return dumper.represent_scalar(_STR_TAG, data.string_value, style='"')


yaml.SafeDumper.add_representer(BoolOrString, _represent_bool_or_string)


def _dump(data: object) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=_NO_WRAP)


def _load(text: str | bytes) -> typ.Any:  # noqa: ANN401
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecodeError.malformed("YAML", exc) from exc


def encode(value: BoolOrString) -> str:
    """Return the YAML scalar for ``value``.

    >>> encode(BoolOrString.from_bool(True))
    'true'
    >>> encode(BoolOrString.from_string("true"))
    '"true"'
    """
    # Bare top-level scalars are followed by an explicit document end marker.
    return _dump(value).removesuffix("...\n").rstrip("\n")


def decode(text: str | bytes, *, field: str | None = None) -> BoolOrString:
    """Decode a single YAML scalar into a :class:`BoolOrString`.

    Raises
    ------
    DecodeError
        If ``text`` is not valid YAML or does not hold a boolean or string
        scalar.
    """
    return BoolOrString.from_native(_load(text), field=field)


def dump(document: object) -> str:
    """Encode the dataclass ``document`` as block-style YAML."""
    return _dump(to_mapping(document))


def load(document_type: type[T], text: str | bytes) -> T:
    """Decode YAML ``text`` into an instance of ``document_type``."""
    return from_mapping(document_type, _load(text))
