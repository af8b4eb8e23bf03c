"""String drills."""

from __future__ import annotations

from string import Template

from core.domain.models import NameParts
from core.domain.operations import TextOp


def transform(text: str, op: TextOp) -> str:
    if op is TextOp.UPPER:
        return text.upper()
    if op is TextOp.LOWER:
        return text.lower()
    if op is TextOp.REVERSE:
        return text[::-1]
    # What `echo -n "$s" | wc -c` reports: bytes, not characters.
    return str(len(text.encode("utf-8")))


def is_palindrome(text: str) -> bool:
    normalized = [c.lower() for c in text if c.isalnum()]
    if not normalized:
        return False
    return normalized == normalized[::-1]


def split_name(fullname: str) -> NameParts:
    parts = fullname.strip().split(maxsplit=1)
    if not parts:
        return NameParts()
    if len(parts) == 1:
        return NameParts(first=parts[0])
    return NameParts(first=parts[0], last=parts[1].strip())


def unquoted(text: str) -> str:
    """An unquoted expansion: word splitting collapses whitespace runs."""

    return " ".join(text.split())


def quoting_demo(name: str) -> list[str]:
    """Double quotes expand `$name`, single quotes keep it literal, `\\` escapes."""

    template = "Hello $name"
    return [
        Template(template).safe_substitute(name=name),
        f"{template} -- this will not expand",
        'this is a quote: " and this is a backslash: \\',
    ]
