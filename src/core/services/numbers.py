"""Integer drills: validation, arithmetic, comparisons and sequences."""

from __future__ import annotations

import re
from typing import Iterator, Sequence

import structlog

from core.domain.models import ArithSummary
from core.domain.operations import ArithmeticOp
from core.errors import DrillError, InvalidNumberError, UsageError

logger = structlog.get_logger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def is_integer(text: str | None) -> bool:
    return text is not None and bool(_INTEGER_RE.match(text))


def parse_int(text: str | None, *, exit_code: int = 1) -> int:
    if not is_integer(text):
        raise InvalidNumberError(text or "", exit_code=exit_code)
    return int(text)  # type: ignore[arg-type]


def sign(value: int) -> str:
    if value > 0:
        return "Number is positive"
    if value < 0:
        return "Number is negative"
    return "Number is zero"


def validate_pair(args: Sequence[str]) -> tuple[int, int]:
    """Exit codes: 3 wrong count, 1 first invalid, 2 second invalid."""

    if len(args) != 2:
        raise UsageError("Enter exactly 2 numbers", exit_code=3)
    first = parse_int(args[0], exit_code=1)
    second = parse_int(args[1], exit_code=2)
    return first, second


def arith(args: Sequence[str]) -> ArithSummary:
    if len(args) != 2:
        raise UsageError("Please pass exactly 2 numbers.")
    first, second = (parse_int(a) for a in args)
    return ArithSummary(
        first=first,
        second=second,
        total=first + second,
        difference=first - second,
        arguments=list(args),
    )


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def calculate(a: int, b: int, op: ArithmeticOp) -> int:
    """Shell `$(( ))` arithmetic; division truncates toward zero."""

    if op is ArithmeticOp.ADD:
        result = a + b
    elif op is ArithmeticOp.SUBTRACT:
        result = a - b
    elif op is ArithmeticOp.MULTIPLY:
        result = a * b
    else:
        if b == 0:
            raise DrillError(f"Cannot divide {a} with 0 enter any other number")
        result = _truncating_div(a, b)

    logger.debug("numbers.calculate", a=a, b=b, op=op.value, result=result)
    return result


def compare(a: int, b: int, choice: str) -> str:
    choice = choice.strip()
    if choice == "1":
        return f"{a} is greater than {b}" if a > b else f"{a} is not greater than {b}"
    if choice == "2":
        return f"{b} is greater than {a}" if b > a else f"{b} is not greater than {a}"
    if choice == "3":
        return f"{a} is equal to {b}" if a == b else f"{a} is not equal to {b}"
    raise UsageError("Invalid selection")


def evens(limit_text: str) -> list[int]:
    if not re.match(r"^[0-9]+$", limit_text or "") or int(limit_text) <= 0:
        raise UsageError("Enter valid number")
    return list(range(2, int(limit_text) + 1, 2))


def fizzbuzz(limit: int) -> Iterator[str]:
    if limit < 1:
        raise UsageError("limit must be a positive integer")
    for i in range(1, limit + 1):
        if i % 15 == 0:
            yield "FizzBuzz"
        elif i % 3 == 0:
            yield "Fizz"
        elif i % 5 == 0:
            yield "Buzz"
        else:
            yield str(i)


def primes(limit: int) -> list[int]:
    """Sieve of Eratosthenes up to and including `limit`."""

    if limit < 0:
        raise UsageError("limit must not be negative")
    if limit < 2:
        return []

    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    p = 2
    while p * p <= limit:
        if sieve[p]:
            sieve[p * p :: p] = bytearray(len(range(p * p, limit + 1, p)))
        p += 1
    return [i for i, flag in enumerate(sieve) if flag]
