from __future__ import annotations

from typing import assert_never

from _infra import FieldError, Missing, OutOfRange, banner, parse_age, parse_email, parse_name

from kungfu import Error, Ok, Result

from multiple_errors import bind2_w, collect_partitioned_w
from multiple_errors.writer import Log, WriterResult


def audited[T, E](field: str, result: Result[T, E]) -> WriterResult[T, E, Log[str]]:
    """
    "Pure" Writer function: pairs a parse result with its audit trail.
    """
    log: Log[str] = Log.of(f"parse:{field}")
    match result:
        case Ok(_):
            log = log.tell(f"{field}:ok")
        case Error(err):
            log = log.tell(f"{field}:rejected({err!r})")
    return WriterResult(result, log)


def show[T, E](wr: WriterResult[T, list[E], Log[str]]) -> None:
    match wr.result:
        case Ok(value):
            print(f"ok: {value!r}")
        case Error(errors):
            print(f"{len(errors)} error(s): {errors!r}")
    print(f"log: {list(wr.log)!r}")


def to_field_error(err: Missing | OutOfRange | FieldError) -> FieldError:
    match err:
        case Missing(field):
            return FieldError(field, "is required")
        case OutOfRange(field, value, low, high):
            return FieldError(field, f"{value} not in [{low}, {high}]")
        case FieldError():
            return err
        case _ as unreachable:
            assert_never(unreachable)


def main() -> None:
    banner("03_writer_logs: errors and audit trail, every input logged")

    forms = [
        {"name": "Ada", "email": "ada@example.org", "age": "36"},
        {"name": "", "email": "nobody", "age": "7"},
    ]

    for form in forms:
        names = collect_partitioned_w([audited("name", parse_name(form)), audited("email", parse_email(form))])
        show(names)

        pair = bind2_w(
            audited("email", parse_email(form)),
            audited("age", parse_age(form)),
            into_a=to_field_error,
            into_b=to_field_error,
        )
        show(pair)


if __name__ == "__main__":
    main()
