"""Ranking students by marks and running priority-queue command scripts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from structkit.heap import MaxHeap

PUSH, POP, TOP = 0, 1, 2


@dataclass(frozen=True)
class Student:
    """A student with a roll number and marks."""

    name: str
    roll: int
    marks: int


def rank_students(students: Iterable[Student]) -> list[Student]:
    """Order students by marks, highest first; equal marks by lower roll first."""
    return sorted(students, key=lambda student: (-student.marks, student.roll))


def run_priority_commands(tokens: Iterable[int | str] | str) -> list[int]:
    """Run a max-priority-queue script and return the values it reports.

    Command 0 pushes the following value, 1 removes the largest value and
    2 reports the largest value. Any other command, or the end of the
    tokens, stops the script. A string is split on whitespace. Popping or
    reading an empty queue raises IndexError; a push without a value
    raises ValueError.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = iter(tokens)
    heap = MaxHeap()
    reported: list[int] = []
    for raw in stream:
        command = int(raw)
        if command == PUSH:
            try:
                value = int(next(stream))
            except StopIteration:
                raise ValueError("push command without a value") from None
            heap.push(value)
        elif command == POP:
            heap.pop()
        elif command == TOP:
            reported.append(heap.peek())
        else:
            break
    return reported