"""Pytest configuration for multitype tests."""

from __future__ import annotations

import logging

import pytest

from multitype import BoolOrString

ROUND_TRIP_VALUES = (
    BoolOrString.from_bool(True),
    BoolOrString.from_bool(False),
    BoolOrString.from_string("true"),
    BoolOrString.from_string("false"),
)


@pytest.fixture(params=ROUND_TRIP_VALUES, ids=lambda value: f"{value.kind}:{value}")
def round_trip_value(request: pytest.FixtureRequest) -> BoolOrString:
    """Yield each Bool/String combination that must survive a round trip."""
    return request.param


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the ``multitype`` loggers."""
    caplog.set_level(logging.DEBUG, logger="multitype")
    return caplog
