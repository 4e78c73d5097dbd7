"""Unit tests for the logging helpers and the interpreter floor they need."""
import logging
import tomllib
from pathlib import Path

import pytest

from cringeshield.utils.logger import (
    REQUEST_ID,
    USER_ID,
    _parse_level,
    clear_request_id,
    set_request_id,
    set_user_id,
)


@pytest.mark.unit
class TestParseLevel:
    @pytest.mark.parametrize("name,level", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("", logging.INFO), ("chatty", logging.INFO)])
    def test_names(self, name, level):
        assert _parse_level(name) == level

    def test_declared_python_floor_has_level_mapping(self):
        # logging.getLevelNamesMapping() first shipped in 3.11.
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        floor = tomllib.loads(pyproject.read_text())["project"]["requires-python"]
        assert floor.startswith(">=")
        major, minor = (int(p) for p in floor[2:].split(".")[:2])
        assert (major, minor) >= (3, 11)


@pytest.mark.unit
class TestRequestContext:
    def test_set_and_clear(self):
        rid = set_request_id()
        set_user_id(42)
        assert REQUEST_ID.get() == rid and USER_ID.get() == "42"
        clear_request_id()
        assert REQUEST_ID.get() == "-" and USER_ID.get() == "-"

    def test_keeps_supplied_id(self):
        assert set_request_id("abc") == "abc"
        clear_request_id()
