# classroster

A small library for holding a class roster. Students are read from
comma-separated text, where the first line is a header that is skipped.
Every other line has the form `perm,last name,first and middle names`.
The roster can be printed, indexed, iterated and sorted by perm number.

## Installation

```
pip install .
```

## Usage

```python
import io

from classroster.roster import Roster
from classroster.student import Student

source = io.StringIO(
    "perm,lname,fname\n"
    "1234567,Smith,Malory Logan\n"
    "5555555,Perez,Juana\n"
    "1111111,Laux,Hunter\n"
)

roster = Roster()
roster.add_students_from_stream(source)

print(len(roster))           # 3
print(roster[1].full_name)   # Juana Perez

roster.sort_by_perm()
print(roster, end="")
# {
# [1111111,Laux,Hunter],
# [1234567,Smith,Malory Logan],
# [5555555,Perez,Juana]
# }

student = Student.from_csv("7654321,Jones,Peter Mark")
print(student)               # [7654321,Jones,Peter Mark]
print(student.perm, student.last_name, student.first_and_middle_names)
```

## Students

`Student` is a frozen dataclass with the fields `perm`, `last_name` and
`first_and_middle_names`. `Student.from_csv(line)` splits a line at its
first two commas; everything after the second comma is the first and
middle names. The perm is the leading integer of the first field and must
fit in a signed 32-bit integer, otherwise `ValueError` is raised.
`full_name` is a property giving the first and middle names followed by
the last name, and `str(student)` gives `[perm,last,first and middle]`.

## Rosters

`Roster` holds at most `Roster.MAX_STUDENTS` (1024) students, in the order
they were read.

- `add_students_from_stream(stream)` replaces the roster with the students
  read from a text stream. The first line is a header and is skipped.
  Only lines ending in a newline are read; an unterminated last line is
  ignored.
- `add_students_from_file(filename)` does the same for a file.
- `reset()` removes every student.
- `len(roster)`, `roster[i]` and iteration give access to the students.
  Only indexes from `0` to `len(roster) - 1` are accepted; anything else
  raises `IndexError`.
- `str(roster)` gives an opening `{`, one student per line separated by
  commas, and a closing `}`, each line ending in a newline.

A `RosterError` is raised if the file cannot be opened, if the input has
no complete header line, or if it lists more students than the roster can
hold.

Sorting with `sort_by_perm()` is a selection sort into ascending perm
order. Its single step is also public:
`index_of_max_perm_among_first_k(k)` finds the student with the largest
perm among the first `k` (the earliest one on ties; `k` outside
`1..len(roster)` raises `ValueError`), and `sort_by_perm_helper(k)` swaps
that student into position `k - 1`.

## What it does not do

The package is a library only: it has no command-line program, and it
does not write rosters back to files.

## Running the tests

```
pip install ".[test]"
pytest
```