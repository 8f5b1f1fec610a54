"""Error types shared across the :mod:`multitype` package."""

from __future__ import annotations

__all__ = ["DecodeError", "InvalidBooleanError", "MultitypeError"]


class MultitypeError(ValueError):
    """Base class for errors raised by :mod:`multitype`."""


class InvalidBooleanError(MultitypeError):
    """Raised when a string token cannot be interpreted as a boolean.

    Parameters
    ----------
    token : str
        The offending string.
    field : str | None
        Name of the field holding the token, when known.
    """

    def __init__(self, token: str, *, field: str | None = None) -> None:
        location = f" for {field}" if field else ""
        super().__init__(
            f"invalid boolean token{location}: {token!r}. Expected 'true' or 'false'."
        )
        self.token = token
        self.field = field


class DecodeError(MultitypeError):
    """Raised when an adapter cannot decode its input into a value."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def unsupported_token(
        cls, token: object, *, field: str | None = None
    ) -> DecodeError:
        """Return an error for a token that is neither a boolean nor a string."""
        location = f" for {field}" if field else ""
        kind = "null" if token is None else type(token).__name__
        return cls(
            f"cannot decode {kind} token{location}: {token!r}. "
            "Expected a boolean or a string.",
            field=field,
        )

    @classmethod
    def malformed(cls, fmt: str, detail: object) -> DecodeError:
        """Return an error describing syntactically invalid ``fmt`` input."""
        return cls(f"malformed {fmt} input: {detail}")
