from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.field}: {self.message}"


@dataclass(frozen=True, slots=True)
class Missing:
    field: str


@dataclass(frozen=True, slots=True)
class OutOfRange:
    field: str
    value: int
    low: int
    high: int


@dataclass(frozen=True, slots=True)
class Account:
    name: str
    email: str
    age: int


def parse_name(form: dict[str, str]) -> Result[str, Missing]:
    name = form.get("name", "").strip()
    if not name:
        return Error(Missing("name"))
    return Ok(name)


def parse_email(form: dict[str, str]) -> Result[str, FieldError]:
    email = form.get("email", "")
    if "@" not in email:
        return Error(FieldError("email", f"{email!r} is not an address"))
    return Ok(email)


def parse_age(form: dict[str, str]) -> Result[int, OutOfRange | FieldError]:
    raw = form.get("age", "")
    if not raw.isdigit():
        return Error(FieldError("age", f"{raw!r} is not a number"))
    age = int(raw)
    if not 13 <= age <= 130:
        return Error(OutOfRange("age", age, 13, 130))
    return Ok(age)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
