# SPDX-License-Identifier: MIT

from typing import Any, Callable

from projectline.model.task import PRIORITY_RANK, STATUS_RANK, Task
from projectline.model.timeline import TimelineSortOption

DATE_COLUMNS: dict[TimelineSortOption, str] = {
    TimelineSortOption.START_DATE: "start_date",
    TimelineSortOption.DUE_DATE: "due_date",
}


def sort_tasks(
    tasks: list[Task],
    option: TimelineSortOption,
    ascending: bool = True,
    title_ignore_case: bool = False,
) -> list[Task]:
    """
    Stable sort of tasks by a single timeline sort option.

    Missing start/due dates rank lowest: they come first when ascending and
    last when descending. Descending order is the reverse of the full
    ascending order, so equal keys also come out reversed.
    """
    if option in DATE_COLUMNS:
        column = DATE_COLUMNS[option]
        none_tasks = [task for task in tasks if task[column] is None]  # type: ignore[literal-required]
        value_tasks = [task for task in tasks if task[column] is not None]  # type: ignore[literal-required]
        value_tasks.sort(key=lambda task: task[column])  # type: ignore[literal-required]
        sorted_tasks = none_tasks + value_tasks
    else:
        sorted_tasks = sorted(tasks, key=_sort_key(option, title_ignore_case))

    if not ascending:
        sorted_tasks.reverse()
    return sorted_tasks


def _sort_key(
    option: TimelineSortOption, title_ignore_case: bool
) -> Callable[[Task], Any]:
    match option:
        case TimelineSortOption.PRIORITY:
            return lambda task: PRIORITY_RANK[task["priority"]]
        case TimelineSortOption.STATUS:
            return lambda task: STATUS_RANK[task["status"]]
        case TimelineSortOption.TITLE:
            if title_ignore_case:
                return lambda task: task["title"].casefold()
            return lambda task: task["title"]
    raise ValueError(f"Unsupported sort option: {option}")
