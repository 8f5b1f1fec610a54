"""Tests for :mod:`multitype.yaml_codec`."""

from __future__ import annotations

import pytest
import yaml

from multitype import BoolOrString, DecodeError, yaml_codec


class TestEncode:
    """Tests for single-scalar encoding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (BoolOrString.from_bool(True), "true"),
            (BoolOrString.from_bool(False), "false"),
            (BoolOrString.from_string("true"), '"true"'),
            (BoolOrString.from_string("false"), '"false"'),
            (BoolOrString.from_string("hello"), '"hello"'),
            (BoolOrString.from_string(""), '""'),
            (BoolOrString(string_value="x", bool_value=True), '"x"'),
            (BoolOrString(bool_value=True), "true"),
        ],
    )
    def test_quotes_strings_only(self, value: BoolOrString, expected: str) -> None:
        """Bool-kind values are bare and String-kind values are double-quoted."""
        assert yaml_codec.encode(value) == expected

    def test_representer_works_with_safe_dump(self) -> None:
        """Values nested in plain data encode through yaml.safe_dump."""
        payload = {"flags": [BoolOrString.from_bool(False), BoolOrString.from_string("no")]}

        assert yaml.safe_dump(payload, sort_keys=False) == (
            'flags:\n- false\n- "no"\n'
        )

    def test_long_strings_stay_on_one_line(self) -> None:
        """String values are not folded across lines."""
        text = "word " * 40

        assert yaml_codec.encode(BoolOrString.from_string(text)) == f'"{text}"'


class TestDecode:
    """Tests for single-scalar decoding."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("true", BoolOrString.from_bool(True)),
            ("false", BoolOrString.from_bool(False)),
            ('"true"', BoolOrString.from_string("true")),
            ("'false'", BoolOrString.from_string("false")),
            ("hello", BoolOrString.from_string("hello")),
            ('"123"', BoolOrString.from_string("123")),
        ],
    )
    def test_quoting_selects_kind(self, text: str, expected: BoolOrString) -> None:
        """Bare booleans decode to Bool kind and quoted text to String kind."""
        assert yaml_codec.decode(text) == expected

    @pytest.mark.parametrize("text", ["123", "1.5", "null", "~", "", "[true]", "a: b"])
    def test_rejects_other_scalars(self, text: str) -> None:
        """Numbers, null and collections are decode errors."""
        with pytest.raises(DecodeError, match="cannot decode"):
            yaml_codec.decode(text, field="multi")

    def test_rejects_malformed_input(self) -> None:
        """Syntax errors surface as DecodeError chained from the parser."""
        with pytest.raises(DecodeError, match="malformed YAML input") as excinfo:
            yaml_codec.decode('"unterminated')

        assert isinstance(excinfo.value.__cause__, yaml.YAMLError)

    def test_round_trip(self, round_trip_value: BoolOrString) -> None:
        """Decoding an encoded value reproduces it exactly."""
        assert yaml_codec.decode(yaml_codec.encode(round_trip_value)) == round_trip_value
