import dataclasses

import pytest

from classroster.student import Student


def test_constructed_fields():
    s1 = Student(1234567, "Smith", "Malory Logan")
    assert s1.perm == 1234567
    assert s1.last_name == "Smith"
    assert s1.first_and_middle_names == "Malory Logan"


def test_full_name():
    s1 = Student(1234567, "Smith", "Malory Logan")
    assert s1.full_name == "Malory Logan Smith"


def test_str():
    s1 = Student(1234567, "Smith", "Malory Logan")
    assert str(s1) == "[1234567,Smith,Malory Logan]"


def test_from_csv():
    s2 = Student.from_csv("7654321,Jones,Peter Mark")
    assert s2.perm == 7654321
    assert s2.last_name == "Jones"
    assert s2.first_and_middle_names == "Peter Mark"


def test_from_csv_keeps_commas_in_first_names():
    s = Student.from_csv("1234567,Smith,Mary, Kay")
    assert s.first_and_middle_names == "Mary, Kay"


def test_from_csv_stops_at_newline():
    s = Student.from_csv("1234567,Smith,Mary Kay\nignored")
    assert s.first_and_middle_names == "Mary Kay"


def test_from_csv_missing_fields_are_empty():
    s = Student.from_csv("1234567")
    assert s.last_name == ""
    assert s.first_and_middle_names == ""


def test_from_csv_round_trip_through_str():
    original = Student(5555555, "Perez", "Juana")
    text = str(original)[1:-1]
    assert Student.from_csv(text) == original


@pytest.mark.parametrize("bad", ["", "abc,Smith,Mary", ",Smith,Mary"])
def test_from_csv_rejects_bad_perm(bad):
    with pytest.raises(ValueError):
        Student.from_csv(bad)


def test_from_csv_rejects_out_of_range_perm():
    with pytest.raises(ValueError):
        Student.from_csv("99999999999,Smith,Mary")


def test_student_is_immutable():
    s = Student(1234567, "Smith", "Malory Logan")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.perm = 1  # type: ignore[misc]
    assert s.perm == 1234567
    assert str(s) == "[1234567,Smith,Malory Logan]"