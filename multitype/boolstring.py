"""A scalar that holds either a boolean or a string.

Configuration fields typed as :class:`BoolOrString` accept both native
``true``/``false`` tokens and freeform strings, including string spellings of
booleans such as ``"true"``. The discriminator records which representation
was present so that re-encoding a decoded value reproduces it exactly.

Examples
--------
>>> BoolOrString.from_string("true").as_bool()
True
>>> BoolOrString.from_string("123").bool_or_default_false()
False
>>> BoolOrString.from_string("false").is_empty()
False
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import typing as typ

from .bool_utils import FALSE_TOKEN, TRUE_TOKEN, parse_bool_token
from .errors import DecodeError, InvalidBooleanError

__all__ = ["BoolOrString", "Kind"]

logger = logging.getLogger(__name__)


class Kind(enum.StrEnum):
    """Discriminator selecting the authoritative slot of a value."""

    UNSPECIFIED = "unspecified"
    BOOL = "bool"
    STRING = "string"


@dataclasses.dataclass(frozen=True, slots=True)
class BoolOrString:
    """Union of a boolean and a string.

    Both slots are always stored. Only the slot selected by :attr:`kind` is
    used for interpretation, but the other one is kept and takes part in
    equality.

    Attributes
    ----------
    kind : Kind
        Which slot is authoritative. :attr:`Kind.UNSPECIFIED` prefers
        :attr:`string_value` when it is non-empty and falls back to
        :attr:`bool_value` otherwise.
    bool_value : bool
        The boolean slot.
    string_value : str
        The string slot.
    """

    kind: Kind = Kind.UNSPECIFIED
    bool_value: bool = False
    string_value: str = ""

    @classmethod
    def from_bool(cls, value: bool) -> BoolOrString:  # noqa: FBT001
        """Return a Bool-kind value holding ``value``."""
        return cls(kind=Kind.BOOL, bool_value=value)

    @classmethod
    def from_string(cls, value: str) -> BoolOrString:
        """Return a String-kind value holding ``value`` verbatim."""
        return cls(kind=Kind.STRING, string_value=value)

    @classmethod
    def parse(cls, text: str) -> BoolOrString:
        """Build a value from untyped text.

        The exact tokens ``"true"`` and ``"false"`` produce a Bool-kind value;
        any other text is kept as a String-kind value.

        >>> BoolOrString.parse("true").kind
        <Kind.BOOL: 'bool'>
        >>> BoolOrString.parse("yes").kind
        <Kind.STRING: 'string'>
        """
        if text in {TRUE_TOKEN, FALSE_TOKEN}:
            return cls.from_bool(text == TRUE_TOKEN)
        return cls.from_string(text)

    @classmethod
    def from_native(cls, token: object, *, field: str | None = None) -> BoolOrString:
        """Decode one parsed token, choosing the kind from the token's type.

        Parameters
        ----------
        token
            A value produced by a JSON or YAML parser.
        field
            Name of the field holding ``token``, used in error messages.

        Raises
        ------
        DecodeError
            If ``token`` is not a ``bool`` or a ``str``.
        """
        # bool is checked first: it is an int subclass.
        if isinstance(token, bool):
            return cls.from_bool(token)
        if isinstance(token, str):
            return cls.from_string(token)
        raise DecodeError.unsupported_token(token, field=field)

    @classmethod
    def json_schema(cls) -> dict[str, typ.Any]:
        """Return the JSON Schema fragment describing the accepted tokens."""
        return {"oneOf": [{"type": "boolean"}, {"type": "string"}]}

    @property
    def resolved_kind(self) -> Kind:
        """Return the kind used for interpretation and encoding."""
        if self.kind is not Kind.UNSPECIFIED:
            return self.kind
        return Kind.STRING if self.string_value else Kind.BOOL

    def as_bool(self, *, field: str | None = None) -> bool:
        """Interpret the value as a boolean.

        Bool-kind values return :attr:`bool_value`. String-kind values are
        parsed with :func:`~multitype.bool_utils.parse_bool_token`.

        Raises
        ------
        InvalidBooleanError
            If the string slot is authoritative and is not exactly ``"true"``
            or ``"false"``.
        """
        if self.resolved_kind is Kind.BOOL:
            return self.bool_value
        return parse_bool_token(self.string_value, field=field)

    def bool_or_default_false(self) -> bool:
        """Interpret the value as a boolean, returning ``False`` on any error."""
        try:
            return self.as_bool()
        except InvalidBooleanError as exc:
            logger.debug("Defaulting to false: %s", exc)
            return False

    def is_empty(self) -> bool:
        """Return ``True`` when the value is the default for omission purposes.

        A String-kind ``"false"`` is not empty even though it interprets as
        ``False``.
        """
        if self.kind is Kind.BOOL:
            return not self.bool_value
        if self.kind is Kind.UNSPECIFIED:
            return not self.string_value and not self.bool_value
        return False

    def to_native(self) -> bool | str:
        """Return the token an encoder emits for this value."""
        if self.resolved_kind is Kind.BOOL:
            return self.bool_value
        return self.string_value

    def __str__(self) -> str:
        if self.resolved_kind is Kind.BOOL:
            return TRUE_TOKEN if self.bool_value else FALSE_TOKEN
        return self.string_value
