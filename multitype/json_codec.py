"""JSON adapter for :class:`~multitype.boolstring.BoolOrString`.

Native ``true``/``false`` tokens decode to Bool-kind values and string tokens
decode to String-kind values, whatever their content. Encoding emits the
authoritative slot verbatim, so ``"false"`` stays a quoted string.
"""

from __future__ import annotations

import json
import typing as typ

from .boolstring import BoolOrString
from .document import from_mapping, to_mapping
from .errors import DecodeError

__all__ = ["decode", "default", "dumps", "encode", "loads"]

T = typ.TypeVar("T")

_SEPARATORS = (",", ":")


def default(obj: object) -> bool | str:
    """Encode hook for :func:`json.dumps` understanding :class:`BoolOrString`.

    Examples
    --------
    >>> json.dumps([BoolOrString.from_string("true")], default=default)
    '["true"]'
    """
    if isinstance(obj, BoolOrString):
        return obj.to_native()
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode(value: BoolOrString) -> str:
    """Return the JSON token for ``value``."""
    return json.dumps(value.to_native(), ensure_ascii=False)


def _load(text: str | bytes) -> typ.Any:  # noqa: ANN401
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError.malformed("JSON", exc) from exc


def decode(text: str | bytes, *, field: str | None = None) -> BoolOrString:
    """Decode a single JSON token into a :class:`BoolOrString`.

    Raises
    ------
    DecodeError
        If ``text`` is not valid JSON or holds a number, null, array or
        object.
    """
    return BoolOrString.from_native(_load(text), field=field)


def dumps(document: object) -> str:
    """Encode the dataclass ``document`` as compact JSON, omitting empty fields."""
    return json.dumps(
        to_mapping(document),
        default=default,
        ensure_ascii=False,
        separators=_SEPARATORS,
    )


def loads(document_type: type[T], text: str | bytes) -> T:
    """Decode JSON ``text`` into an instance of ``document_type``."""
    return from_mapping(document_type, _load(text))
