"""Quiz grading: average of subject marks, letter grade and a printed report card."""

from __future__ import annotations

from dataclasses import dataclass

from pocketcalc.console import Console

SUBJECTS = 5


def grade_for(average: float) -> str:
    """Letter grade for an average mark; anything outside 50-100 fails."""
    if 90 <= average <= 100:
        return "A"
    if 80 <= average < 90:
        return "B"
    if 70 <= average < 80:
        return "C"
    if 60 <= average < 70:
        return "D"
    if 50 <= average < 60:
        return "E"
    return "FAIL"


@dataclass(frozen=True)
class ReportCard:
    name: str
    roll: int
    marks: tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.marks:
            raise ValueError("a report card needs at least one mark")
        object.__setattr__(self, "marks", tuple(self.marks))

    @property
    def average(self) -> float:
        return sum(self.marks) / len(self.marks)

    @property
    def grade(self) -> str:
        return grade_for(self.average)

    def render(self) -> str:
        """The report card as printed text."""
        return (
            "\n--- Report Card ---\n"
            f"Name       : {self.name}\n"
            f"Roll Number: {self.roll}\n"
            f"Average    : {self.average:.2f}\n"
            f"Grade      : {self.grade}\n"
        )


def run(console: Console) -> int:
    """Ask for a student's details and marks, then print the report card."""
    name = console.read_line("Enter student's name: ").strip()
    while not name:
        name = console.read_line().strip()
    roll = console.read_int("Enter roll number: ")
    console.write(f"Enter marks for {SUBJECTS} subjects:\n")
    marks = tuple(console.read_float(f"Subject {number}: ") for number in range(1, SUBJECTS + 1))
    console.write(ReportCard(name, roll, marks).render())
    return 0