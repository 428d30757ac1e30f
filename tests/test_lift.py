"""Lift helpers: building Results for aggregation and leaving them again."""

from __future__ import annotations

import json

import pytest
from kungfu import Error, Ok

from multiple_errors import MultipleErrors, collect_partitioned, lift as L


class TestUp:
    def test_ok_and_fail(self) -> None:
        assert L.up.ok(1) == Ok(1)
        assert L.up.fail("e") == Error("e")

    def test_optional(self) -> None:
        assert L.optional(5, error=lambda: "missing") == Ok(5)
        assert L.optional(None, error=lambda: "missing") == Error("missing")

    def test_optional_builds_error_lazily(self) -> None:
        calls: list[int] = []
        L.optional(1, error=lambda: calls.append(1))
        assert calls == []

    def test_catching(self) -> None:
        assert L.catching(lambda: json.loads("[1]"), on_error=type) == Ok([1])
        assert L.catching(lambda: int("x"), on_error=type) == Error(ValueError)

    def test_catching_feeds_collection(self) -> None:
        raw = {"age": "x", "height": "180", "weight": "?"}
        results = [
            L.catching(lambda key=key: int(raw[key]), on_error=lambda e, key=key: key)
            for key in ("age", "height", "weight")
        ]
        assert collect_partitioned(results) == Error(["age", "weight"])


class TestDown:
    def test_unwrap_or_raise(self) -> None:
        assert L.down.unwrap_or_raise(Ok([1, 2])) == [1, 2]
        with pytest.raises(MultipleErrors) as exc_info:
            L.down.unwrap_or_raise(collect_partitioned([Error("a"), Error("b")]))
        assert exc_info.value.errors == ["a", "b"]
        assert "2 error(s)" in str(exc_info.value)

    def test_or_else(self) -> None:
        assert L.or_else(Ok(1), 0) == 1
        assert L.or_else(Error("e"), 0) == 0

    def test_rejects_values_that_are_not_results(self) -> None:
        with pytest.raises(AssertionError):
            L.or_else("junk", 0)  # type: ignore[arg-type]
        with pytest.raises(AssertionError):
            L.down.unwrap_or_raise(None)  # type: ignore[arg-type]
