"""A roster of students read from CSV text, sortable by perm number."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from .student import Student


class RosterError(Exception):
    """Raised when roster input cannot be read or the roster is full."""


class Roster:
    """An ordered collection of at most ``MAX_STUDENTS`` students."""

    MAX_STUDENTS = 1024

    def __init__(self) -> None:
        self._students: list[Student] = []

    def reset(self) -> None:
        """Remove every student from the roster."""
        self._students.clear()

    def add_students_from_file(self, filename) -> None:
        """Replace the roster with the students listed in ``filename``."""
        try:
            with open(filename, encoding="utf-8", newline="\n") as stream:
                self.add_students_from_stream(stream)
        except OSError as exc:
            raise RosterError(f"Could not open input file: {filename}") from exc

    def add_students_from_stream(self, stream: TextIO) -> None:
        """Replace the roster with the students read from a text stream.

        The first line is a header and is skipped. Only lines ending in a
        newline are read; an unterminated final line is ignored.
        """
        self.reset()
        header = stream.readline()
        if not header.endswith("\n"):
            raise RosterError("Unable to read first line of input stream")
        for line in stream:
            if not line.endswith("\n"):
                break
            if len(self._students) >= self.MAX_STUDENTS:
                raise RosterError(
                    f"Roster cannot hold more than {self.MAX_STUDENTS} students"
                )
            self._students.append(Student.from_csv(line[:-1]))

    def __len__(self) -> int:
        return len(self._students)

    def __getitem__(self, index: int) -> Student:
        if not 0 <= index < len(self._students):
            raise IndexError(f"roster index out of range: {index}")
        return self._students[index]

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __str__(self) -> str:
        body = ",\n".join(str(student) for student in self._students)
        return "{\n" + (body + "\n" if body else "") + "}\n"

    def index_of_max_perm_among_first_k(self, k: int) -> int:
        """Index of the largest perm among the first ``k`` students.

        On ties the earliest index wins.
        """
        if not 0 < k <= len(self._students):
            raise ValueError(f"k must be in 1..{len(self._students)}, got {k}")
        return max(range(k), key=lambda i: self._students[i].perm)

    def sort_by_perm_helper(self, k: int) -> None:
        """Swap the largest perm among the first ``k`` into position ``k - 1``."""
        im = self.index_of_max_perm_among_first_k(k)
        students = self._students
        students[im], students[k - 1] = students[k - 1], students[im]

    def sort_by_perm(self) -> None:
        """Sort the roster by ascending perm using selection sort."""
        for k in range(len(self._students), 1, -1):
            self.sort_by_perm_helper(k)