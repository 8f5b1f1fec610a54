"""Strict boolean token parsing.

Only the exact, case-sensitive tokens ``"true"`` and ``"false"`` are
accepted. Looser spellings such as ``"1"``, ``"yes"`` or ``"True"`` are
rejected so that documents keep the meaning they were written with.
"""

from __future__ import annotations

from .errors import InvalidBooleanError

__all__ = ["FALSE_TOKEN", "TRUE_TOKEN", "is_bool_token", "parse_bool_token"]

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"


def is_bool_token(value: str) -> bool:
    """Return ``True`` when ``value`` is exactly ``"true"`` or ``"false"``."""
    return value in {TRUE_TOKEN, FALSE_TOKEN}


def parse_bool_token(value: str, *, field: str | None = None) -> bool:
    """Parse ``value`` as a boolean, accepting only the two literal tokens.

    Parameters
    ----------
    value
        The string to parse.
    field
        The name of the field holding ``value``, used in error messages.

    Returns
    -------
    bool
        ``True`` for ``"true"`` and ``False`` for ``"false"``.

    Raises
    ------
    InvalidBooleanError
        If ``value`` is any other string, including the empty string.

    Examples
    --------
    >>> parse_bool_token("true")
    True
    >>> parse_bool_token("false")
    False
    """
    if value == TRUE_TOKEN:
        return True
    if value == FALSE_TOKEN:
        return False
    raise InvalidBooleanError(value, field=field)
