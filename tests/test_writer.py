"""Writer carrier and *_w combinators: logs survive aggregation."""

from __future__ import annotations

from kungfu import Error, Ok

from multiple_errors import (
    Log,
    WriterResult,
    bind2_w,
    collect_partitioned_w,
    fail_all_w,
)
from tests.conftest import FAIL, PLACEHOLDER, SUCCEED, A, ErrA, HighLevelErr, a, placeholder_or_wrap


class TestLog:
    def test_combine_is_non_mutating_append(self) -> None:
        left = Log.of("a", "b")
        right = Log.of("c")
        assert left.combine(right) == ["a", "b", "c"]
        assert left == ["a", "b"]

    def test_empty_is_identity(self) -> None:
        log = Log.of(1, 2)
        assert Log[int]().combine(log) == log
        assert log.combine(Log[int]()) == log

    def test_concat_and_tell(self) -> None:
        assert Log.concat([Log.of("a"), Log(), Log.of("b")]) == ["a", "b"]
        assert Log.of("a").tell("b") == ["a", "b"]


class TestWriterResult:
    def test_constructors_and_equality(self) -> None:
        assert WriterResult.ok(1, "made") == WriterResult(Ok(1), Log.of("made"))
        assert WriterResult.error("e") == WriterResult(Error("e"), Log())
        assert WriterResult.ok(1) != WriterResult.error(1)

    def test_match_args(self) -> None:
        match WriterResult.ok(1, "x"):
            case WriterResult(Ok(value), log):
                assert value == 1
                assert log == ["x"]
            case _:
                raise AssertionError("expected Ok")


class TestCollectPartitionedW:
    def test_merges_all_logs_on_failure(self) -> None:
        wr = collect_partitioned_w([
            WriterResult.ok(1, "one"),
            WriterResult.error("bad", "two"),
            WriterResult.ok(3, "three"),
        ])
        assert wr == WriterResult(Error(["bad"]), Log.of("one", "two", "three"))

    def test_merges_all_logs_on_success(self) -> None:
        wr = collect_partitioned_w([WriterResult.ok(1, "one"), WriterResult.ok(2, "two")])
        assert wr == WriterResult(Ok([1, 2]), Log.of("one", "two"))

    def test_told_entries_are_kept_in_input_order(self) -> None:
        first = WriterResult(Ok(1), Log.of("parse:a").tell("a:ok"))
        second = WriterResult(Error("bad"), Log.of("parse:b").tell("b:rejected"))
        wr = collect_partitioned_w([first, second])
        assert wr == WriterResult(Error(["bad"]), Log.of("parse:a", "a:ok", "parse:b", "b:rejected"))
        assert first.log == ["parse:a", "a:ok"]

    def test_empty(self) -> None:
        assert collect_partitioned_w([]) == WriterResult(Ok([]), Log())


class TestFailAllW:
    def test_error_branch_keeps_logs(self) -> None:
        wr = fail_all_w(
            [WriterResult(a(SUCCEED), Log.of("a1")), WriterResult(a(FAIL), Log.of("a2"))],
            placeholder_or_wrap,
        )
        assert wr.result == Error([PLACEHOLDER, HighLevelErr.of(ErrA())])
        assert wr.log == ["a1", "a2"]

    def test_ok_branch_keeps_logs(self) -> None:
        wr = fail_all_w(
            iter([WriterResult(a(SUCCEED), Log.of("x")), WriterResult(a(SUCCEED), Log.of("y"))]),
            placeholder_or_wrap,
        )
        assert wr == WriterResult(Ok([A(), A()]), Log.of("x", "y"))


class TestBind2W:
    def test_merges_logs_on_both_branches(self) -> None:
        ok = bind2_w(WriterResult.ok(1, "a"), WriterResult.ok("b", "b"))
        assert ok == WriterResult(Ok((1, "b")), Log.of("a", "b"))

        err = bind2_w(
            WriterResult.error(404, "a"),
            WriterResult.error("nan", "b"),
            into_a=lambda code: f"http {code}",
            into_b=lambda msg: f"parse {msg}",
        )
        assert err == WriterResult(Error(["http 404", "parse nan"]), Log.of("a", "b"))
