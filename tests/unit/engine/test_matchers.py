r"""Unit tests for match predicates."""

from __future__ import annotations

import re

import pytest

from retryable.engine.matchers import default_error_predicate, kind_matches, message_matches


class CustomError(ValueError):
    pass


def test_kind_matches_empty_is_wildcard() -> None:
    assert kind_matches(KeyError("k"), ())


def test_kind_matches_member() -> None:
    assert kind_matches(ArithmeticError(), (TypeError, ArithmeticError))
    assert not kind_matches(ArithmeticError(), (TypeError,))


def test_kind_matches_subclass() -> None:
    assert kind_matches(CustomError("x"), (ValueError,))
    assert not kind_matches(ValueError("x"), (CustomError,))


def test_message_matches_empty_is_wildcard() -> None:
    assert message_matches("anything", ())


def test_message_matches_substring() -> None:
    assert message_matches("bad args", ("bad",))
    assert not message_matches("good args", ("bad",))


def test_message_matches_pattern() -> None:
    assert message_matches("bad args", ("blah", re.compile(r"bad")))
    assert not message_matches("good args", ("blah", re.compile(r"bad")))


def test_message_matches_pattern_anywhere() -> None:
    assert message_matches("Request THROTTLED", (re.compile(r"throttl", re.IGNORECASE),))


def test_message_matches_empty_message() -> None:
    assert not message_matches("", ("timeout",))


@pytest.mark.parametrize(
    "value",
    ["error", ("error",), ("error", "no"), ("error", "fail", "extra")],
)
def test_default_error_predicate_true(value: object) -> None:
    assert default_error_predicate(value)


@pytest.mark.parametrize(
    "value",
    [
        None,
        "ok",
        "errors",
        (),
        ("ok", "yes"),
        ["error", "no"],
        {"ok": "success"},
        {"error": "no"},
        (1, "error"),
    ],
)
def test_default_error_predicate_false(value: object) -> None:
    assert not default_error_predicate(value)
