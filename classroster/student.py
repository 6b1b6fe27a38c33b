"""A single student record: perm number, last name, first and middle names."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_perm(text: str) -> int:
    """Read the leading integer of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid perm number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"perm number out of range: {text!r}")
    return value


@dataclass(frozen=True)
class Student:
    """A student identified by perm number."""

    perm: int
    last_name: str
    first_and_middle_names: str

    @classmethod
    def from_csv(cls, line: str) -> Student:
        """Build a student from a line such as ``1234567,Smith,Mary Kay``.

        Everything after the second comma, up to the end of the line,
        belongs to the first and middle names.
        """
        parts = line.split(",", 2)
        perm = _parse_perm(parts[0])
        last_name = parts[1] if len(parts) > 1 else ""
        first_names = parts[2].split("\n", 1)[0] if len(parts) > 2 else ""
        return cls(perm, last_name, first_names)

    @property
    def full_name(self) -> str:
        """First and middle names followed by the last name."""
        return f"{self.first_and_middle_names} {self.last_name}"

    def __str__(self) -> str:
        return f"[{self.perm},{self.last_name},{self.first_and_middle_names}]"