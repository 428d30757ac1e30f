from __future__ import annotations

from typing import assert_never

from _infra import Account, FieldError, Missing, OutOfRange, banner, parse_age, parse_email, parse_name

from kungfu import Error, Ok, Result

from multiple_errors import Bindings, returns_early


def from_missing(err: Missing) -> FieldError:
    return FieldError(err.field, "is required")


def from_age(err: OutOfRange | FieldError) -> FieldError:
    match err:
        case OutOfRange(field, value, low, high):
            return FieldError(field, f"{value} not in [{low}, {high}]")
        case FieldError():
            return err
        case _ as unreachable:
            assert_never(unreachable)


@returns_early
def sign_up(form: dict[str, str]) -> Result[Account, list[FieldError]]:
    errors = Bindings[FieldError]()
    name = errors.bind(parse_name(form), from_missing)
    email = errors.bind(parse_email(form))
    age = errors.bind(parse_age(form), from_age)
    errors.or_return(Error)

    return Ok(Account(name.value, email.value, age.value))


def main() -> None:
    banner("02_form_validation: Bindings + returns_early")

    forms = [
        {"name": "Ada", "email": "ada@example.org", "age": "36"},
        {"name": "", "email": "nope", "age": "7"},
        {"name": "Bob", "email": "bob@example.org", "age": "old"},
    ]
    for form in forms:
        match sign_up(form):
            case Ok(account):
                print(f"created {account}")
            case Error(problems):
                print("rejected: " + "; ".join(str(p) for p in problems))


if __name__ == "__main__":
    main()
