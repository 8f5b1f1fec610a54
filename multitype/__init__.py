"""A boolean-or-string scalar for configuration documents.

The :class:`BoolOrString` type accepts either native booleans or strings in
the same field and remembers which one it was given, so that JSON and YAML
round trips keep the original representation.
"""

from __future__ import annotations

from . import json_codec, yaml_codec
from .bool_utils import parse_bool_token
from .boolstring import BoolOrString, Kind
from .document import Omit, from_mapping, omittable, to_mapping
from .errors import DecodeError, InvalidBooleanError, MultitypeError

__all__ = [
    "BoolOrString",
    "DecodeError",
    "InvalidBooleanError",
    "Kind",
    "MultitypeError",
    "Omit",
    "from_mapping",
    "json_codec",
    "omittable",
    "parse_bool_token",
    "to_mapping",
    "yaml_codec",
]
