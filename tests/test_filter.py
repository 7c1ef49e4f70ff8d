# tests/test_filter.py

from __future__ import annotations

import itertools

import pendulum
import pytest

from projectline.model.task import TaskStatus
from projectline.model.timeline import TimelineFilter
from projectline.query.filter import filter_tasks, matches
from projectline.template.timeline import get_timeline_filter_template

from .builders import build_task, ids


def _filter(
    statuses: set[TaskStatus] | None = None,
    assigned_to_me: bool = False,
    due_range: tuple[str, str] | None = None,
) -> TimelineFilter:
    timeline_filter = get_timeline_filter_template()
    if statuses is not None:
        timeline_filter["statuses"] = statuses
    timeline_filter["assigned_to_me"] = assigned_to_me
    if due_range is not None:
        timeline_filter["due_date_range"] = {
            "start": pendulum.parse(due_range[0]),  # type: ignore[typeddict-item]
            "end": pendulum.parse(due_range[1]),  # type: ignore[typeddict-item]
        }
    return timeline_filter


def test_default_filter_includes_every_status() -> None:
    tasks = [build_task(str(i), status=status) for i, status in enumerate(TaskStatus)]
    assert filter_tasks(tasks, get_timeline_filter_template(), None) == tasks


def test_status_filter_excludes_other_statuses() -> None:
    todo = build_task("1", status=TaskStatus.TODO)
    done = build_task("2", status=TaskStatus.COMPLETED)
    timeline_filter = _filter(statuses={TaskStatus.TODO})

    assert matches(todo, timeline_filter, None)
    assert not matches(done, timeline_filter, None)


def test_assigned_to_me_requires_current_user_in_assignees() -> None:
    mine = build_task("1", assigned_to=["ana", "bo"])
    theirs = build_task("2", assigned_to=["bo"])
    nobody = build_task("3")
    timeline_filter = _filter(assigned_to_me=True)

    assert ids(filter_tasks([mine, theirs, nobody], timeline_filter, "ana")) == ["1"]


def test_assigned_to_me_without_user_matches_nothing() -> None:
    task = build_task("1", assigned_to=["ana"])
    assert not matches(task, _filter(assigned_to_me=True), None)


def test_assigned_to_me_off_ignores_assignees() -> None:
    task = build_task("1", assigned_to=[])
    assert matches(task, _filter(), "ana")


def test_due_range_is_inclusive_on_both_ends() -> None:
    timeline_filter = _filter(due_range=("2024-01-01", "2024-01-10"))
    on_start = build_task("1", due="2024-01-01")
    on_end = build_task("2", due="2024-01-10")
    inside = build_task("3", due="2024-01-05")
    after = build_task("4", due="2024-01-10T00:00:01")
    before = build_task("5", due="2023-12-31T23:59:59")

    result = filter_tasks([on_start, on_end, inside, after, before], timeline_filter, None)
    assert ids(result) == ["1", "2", "3"]


def test_due_range_excludes_tasks_without_due_date() -> None:
    task = build_task("1", start="2024-01-02")
    assert not matches(task, _filter(due_range=("2024-01-01", "2024-01-10")), None)


def test_filter_keeps_input_order() -> None:
    tasks = [build_task(id) for id in ("c", "a", "b")]
    assert ids(filter_tasks(tasks, _filter(), None)) == ["c", "a", "b"]


@pytest.mark.parametrize("assigned_to_me", [False, True])
def test_matches_is_conjunction_of_all_criteria(assigned_to_me: bool) -> None:
    statuses = {TaskStatus.TODO, TaskStatus.REVIEW}
    timeline_filter = _filter(
        statuses=statuses,
        assigned_to_me=assigned_to_me,
        due_range=("2024-01-01", "2024-01-31"),
    )
    due_dates = [None, "2023-12-01", "2024-01-15"]
    assignees = [[], ["ana"], ["bo"]]

    for index, (status, due, assigned) in enumerate(
        itertools.product(TaskStatus, due_dates, assignees)
    ):
        task = build_task(str(index), status=status, due=due, assigned_to=assigned)
        expected = (
            status in statuses
            and (not assigned_to_me or "ana" in assigned)
            and due == "2024-01-15"
        )
        assert matches(task, timeline_filter, "ana") is expected
