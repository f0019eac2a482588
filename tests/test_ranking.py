import pytest

from structkit.ranking import Student, rank_students, run_priority_commands


def test_rank_students_source_example():
    students = [
        Student("rahu", 25, 85),
        Student("sh", 36, 90),
        Student("tamim", 9, 85),
        Student("sakib", 23, 95),
        Student("musi", 30, 80),
    ]
    ranked = rank_students(students)
    assert [s.name for s in ranked] == ["sakib", "sh", "tamim", "rahu", "musi"]


def test_rank_students_order_invariant():
    students = [Student(f"s{i}", roll, marks) for i, (roll, marks) in enumerate(
        [(5, 70), (2, 70), (9, 88), (1, 60), (3, 88)]
    )]
    ranked = rank_students(students)
    assert sorted(ranked, key=lambda s: s.name) == sorted(students, key=lambda s: s.name)
    for first, second in zip(ranked, ranked[1:]):
        assert first.marks > second.marks or (
            first.marks == second.marks and first.roll <= second.roll
        )


def test_rank_students_empty():
    assert rank_students([]) == []


def test_run_priority_commands_reports_max():
    assert run_priority_commands("0 5 0 3 0 9 2 1 2 3") == [9, 5]


def test_run_priority_commands_stops_on_unknown_command():
    assert run_priority_commands([0, 4, 2, 7, 2, 0, 8]) == [4]


def test_run_priority_commands_end_of_tokens():
    assert run_priority_commands("0 1 0 2 2") == [2]


def test_run_priority_commands_pop_empty():
    with pytest.raises(IndexError):
        run_priority_commands("1")


def test_run_priority_commands_top_empty():
    with pytest.raises(IndexError):
        run_priority_commands("2")


def test_run_priority_commands_push_without_value():
    with pytest.raises(ValueError):
        run_priority_commands("0")