# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from typing import Any, Callable, Optional, Protocol, TypeAlias

import pendulum

from projectline.model.task import Priority, Task, TaskStatus
from projectline.model.timeline import TimelineFilter, TimelineSort, TimelineState
from projectline.query.filter import filter_tasks
from projectline.query.sort import sort_tasks
from projectline.query.span import compute_span
from projectline.service import viewport as viewport_service
from projectline.template.timeline import get_timeline_state_template
from projectline.time import is_aware, now_utc

logger = logging.getLogger(__name__)

Listener: TypeAlias = Callable[[TimelineState], None]


class TaskSource(Protocol):
    def project_exists(self, project_id: str) -> bool: ...

    def get_tasks_by_project(self, project_id: str) -> list[Task]: ...


def is_timeline_task(task: Any) -> bool:
    """Check that a record carries every field the timeline reads, with usable types."""
    if not isinstance(task, dict):
        return False
    if not isinstance(task.get("id"), str) or task["id"] == "":
        return False
    if not isinstance(task.get("title"), str):
        return False
    try:
        TaskStatus(task.get("status"))
        Priority(task.get("priority"))
    except ValueError:
        return False
    if not isinstance(task.get("assigned_to"), list):
        return False
    for column in ("start_date", "due_date"):
        value = task.get(column)
        if value is None:
            continue
        # Naive dates cannot be compared with the store's UTC clock
        if not isinstance(value, pendulum.DateTime) or not is_aware(value):
            return False
    return True


class TimelineStore:
    """
    Derived timeline state for one project view.

    Holds the raw task list alongside the current filter, sort and viewport,
    and re-derives the visible tasks on every change. Every operation returns
    the new snapshot and publishes it to subscribers; snapshots are deep
    copies, so consumers never share state with the store.
    """

    def __init__(
        self,
        current_user_id: Optional[str] = None,
        clock: Optional[Callable[[], pendulum.DateTime]] = None,
        sort: Optional[TimelineSort] = None,
        title_ignore_case: bool = False,
    ) -> None:
        self.current_user_id = current_user_id
        self.title_ignore_case = title_ignore_case
        self._clock = clock if clock is not None else now_utc
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._raw_tasks: list[Task] = []
        self._state = get_timeline_state_template(self._clock())
        if sort is not None:
            self._state["sort"] = deepcopy(sort)

    def snapshot(self) -> TimelineState:
        with self._lock:
            return deepcopy(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def begin_loading(self) -> TimelineState:
        with self._lock:
            self._state["is_loading"] = True
            return self.__publish()

    def fail(self, message: str) -> TimelineState:
        with self._lock:
            logger.warning("timeline task source failed: %s", message)
            self._state["is_loading"] = False
            self._state["error"] = message
            return self.__publish()

    def load_tasks(self, raw_tasks: list[Task]) -> TimelineState:
        with self._lock:
            valid_tasks = [task for task in raw_tasks if is_timeline_task(task)]
            dropped = len(raw_tasks) - len(valid_tasks)
            if dropped > 0:
                logger.debug("dropped %d malformed task record(s)", dropped)

            self._raw_tasks = deepcopy(valid_tasks)
            span = compute_span(self._raw_tasks, self._clock())
            viewport = self._state["viewport"]
            viewport["start"] = span["start"]
            viewport["end"] = span["end"]
            viewport["days_to_show"] = span["days_to_show"]

            self._state["is_loading"] = False
            self._state["error"] = None
            self.__derive()
            return self.__publish()

    def load_from(self, source: TaskSource, project_id: str) -> TimelineState:
        self.begin_loading()
        try:
            if not source.project_exists(project_id):
                return self.fail("Project not found")
            tasks = source.get_tasks_by_project(project_id)
        except Exception as e:
            logger.exception("loading tasks for project %s failed", project_id)
            return self.fail(str(e) or "Failed to load project tasks")
        return self.load_tasks(tasks)

    def update_filter(self, timeline_filter: TimelineFilter) -> TimelineState:
        with self._lock:
            self._state["filter"] = deepcopy(timeline_filter)
            self.__derive()
            return self.__publish()

    def update_sort(self, sort: TimelineSort) -> TimelineState:
        with self._lock:
            self._state["sort"] = deepcopy(sort)
            self.__derive()
            return self.__publish()

    def zoom_in(self) -> TimelineState:
        with self._lock:
            self._state["viewport"] = viewport_service.zoom_in(self._state["viewport"])
            return self.__publish()

    def zoom_out(self) -> TimelineState:
        with self._lock:
            self._state["viewport"] = viewport_service.zoom_out(self._state["viewport"])
            return self.__publish()

    def scroll_to_today(self) -> TimelineState:
        with self._lock:
            self._state["viewport"] = viewport_service.scroll_to_today(
                self._state["viewport"], self._clock()
            )
            return self.__publish()

    def __derive(self) -> None:
        # Always derive from the raw tasks, never from the previous visible list
        visible = filter_tasks(
            self._raw_tasks, self._state["filter"], self.current_user_id
        )
        self._state["visible_tasks"] = sort_tasks(
            visible,
            self._state["sort"]["option"],
            self._state["sort"]["ascending"],
            self.title_ignore_case,
        )

    def __publish(self) -> TimelineState:
        for listener in list(self._listeners):
            listener(deepcopy(self._state))
        return deepcopy(self._state)
