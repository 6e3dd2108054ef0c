"""Tests for the result values."""

import dataclasses

import pytest

from jira_mcp.result import Err, Ok


def test_ok():
    result = Ok([1, 2])

    assert result.is_ok() is True
    assert result.is_err() is False
    assert result.value == [1, 2]


def test_err():
    error = ValueError("nope")
    result = Err(error)

    assert result.is_ok() is False
    assert result.is_err() is True
    assert result.error is error


def test_results_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok(1).value = 2


def test_pattern_matching():
    def describe(result):
        match result:
            case Ok(value=value):
                return f"ok:{value}"
            case Err(error=error):
                return f"err:{error}"

    assert describe(Ok("csv")) == "ok:csv"
    assert describe(Err("boom")) == "err:boom"
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
