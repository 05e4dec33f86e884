import logging

import pytest

from range_bridge import ParseError, UnsupportedConstraint, hashicorp_to_npm, npm_to_hashicorp


def test_default_sink_logs_invalid_hashicorp_constraint(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="range_bridge.diagnostics"):
        with pytest.raises(ParseError):
            hashicorp_to_npm(">= 1.0, nope")

    [record] = caplog.records
    assert record.name == "range_bridge.diagnostics"
    assert record.levelno == logging.WARNING
    assert record.getMessage().startswith("Invalid hashicorp constraint")
    assert record.constraint == ">= 1.0, nope"
    assert record.element == " nope"


def test_default_sink_logs_unsupported_constraint(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="range_bridge.diagnostics"):
        with pytest.raises(UnsupportedConstraint):
            hashicorp_to_npm("!= 2.0")

    assert "Unsupported hashicorp constraint" in caplog.text
    assert "!= 2.0" in caplog.text


def test_default_sink_logs_invalid_npm_constraint(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="range_bridge.diagnostics"):
        with pytest.raises(ParseError):
            npm_to_hashicorp("1.x.x")

    assert "Invalid npm constraint" in caplog.text


def test_successful_conversion_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        hashicorp_to_npm("~> 1.2")
        npm_to_hashicorp("^1.2.0")

    assert caplog.records == []


def test_custom_sink_is_called_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    calls: list[tuple[str, str, str]] = []

    def collect(message: str, *, constraint: str, element: str) -> None:
        calls.append((message, constraint, element))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(ParseError):
            npm_to_hashicorp("^1.0.0 || ^2.0.0", on_error=collect)

    assert calls == [("Invalid npm constraint", "^1.0.0 || ^2.0.0", "||")]
    assert caplog.records == []


def test_sink_only_sees_first_failure() -> None:
    calls: list[str] = []

    def collect(message: str, *, constraint: str, element: str) -> None:
        calls.append(element)

    with pytest.raises(ParseError):
        hashicorp_to_npm("bad, worse", on_error=collect)

    assert calls == ["bad"]
