import io

import pytest

from pocketcalc import grading
from pocketcalc.console import Console


@pytest.mark.parametrize(
    "average, grade",
    [
        (100, "A"),
        (90, "A"),
        (89.99, "B"),
        (80, "B"),
        (70, "C"),
        (60, "D"),
        (50, "E"),
        (49.9, "FAIL"),
        (101, "FAIL"),
        (-5, "FAIL"),
    ],
)
def test_grade_boundaries(average, grade):
    assert grading.grade_for(average) == grade


def test_uniform_marks_average():
    card = grading.ReportCard("Ada", 7, (90, 90, 90, 90, 90))
    assert card.average == 90
    assert card.grade == "A"


def test_average_lies_between_extremes():
    marks = (40, 55, 70, 85, 100)
    card = grading.ReportCard("Bo", 3, marks)
    assert min(marks) <= card.average <= max(marks)


def test_marks_are_stored_as_tuple():
    card = grading.ReportCard("Cy", 1, [50, 60])
    assert card.marks == (50, 60)


def test_empty_marks_rejected():
    with pytest.raises(ValueError):
        grading.ReportCard("Nobody", 0, ())


def test_render_layout():
    card = grading.ReportCard("Ada", 7, (80, 80, 80, 80, 80))
    assert card.render() == (
        "\n--- Report Card ---\n"
        "Name       : Ada\n"
        "Roll Number: 7\n"
        "Average    : 80.00\n"
        "Grade      : B\n"
    )


def test_run_reads_full_name_and_marks():
    out = io.StringIO()
    console = Console(io.StringIO("\nAda Lovelace\n12\n80 80 80\n80\n80\n"), out)
    assert grading.run(console) == 0
    text = out.getvalue()
    assert "Subject 5: " in text
    assert "Name       : Ada Lovelace\n" in text
    assert "Roll Number: 12\n" in text
    assert "Average    : 80.00\n" in text
    assert text.endswith("Grade      : B\n")


def test_run_with_missing_marks():
    console = Console(io.StringIO("Ada\n1\n90 90\n"), io.StringIO())
    with pytest.raises(EOFError):
        grading.run(console)