# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from projectline import configuration, time
from projectline.model.entity_id import EntityId, generate_entity_id
from projectline.model.task import Priority, Task, TaskStatus
from projectline.repository.project import PROJECT_REPO, ProjectRepository

logger = logging.getLogger(__name__)

TASK_FIELDS = (
    "id",
    "project_id",
    "title",
    "description",
    "status",
    "priority",
    "assigned_to",
    "start_date",
    "due_date",
    "created",
    "updated",
)


class TaskRepository:
    def __init__(self, project_repo: ProjectRepository = PROJECT_REPO) -> None:
        self._tasks: Optional[list[Task]] = None
        self._project_repo = project_repo
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            try:
                raw_task = load(file_path.read_text(), Loader=Loader)
                if raw_task is None:
                    continue
                if not isinstance(raw_task, dict):
                    logger.warning(
                        "skipping task file %s: expected a mapping, got %s",
                        file_path,
                        type(raw_task).__name__,
                    )
                    continue
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
            except (YAMLError, KeyError, TypeError, ValueError) as e:
                logger.warning("skipping malformed task file %s: %s", file_path, e)

    def __save_data(self) -> None:
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["status"] = str(task["status"])
        serializable_task["priority"] = str(task["priority"])
        serializable_task["start_date"] = time.datetime_to_iso_str_optional(
            task["start_date"]
        )
        serializable_task["due_date"] = time.datetime_to_iso_str_optional(
            task["due_date"]
        )
        serializable_task["created"] = time.datetime_to_iso_str(task["created"])
        serializable_task["updated"] = time.datetime_to_iso_str(task["updated"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        # Project the stored record down to the fields the timeline knows about
        deserializable_task = {field: task.get(field) for field in TASK_FIELDS}
        deserializable_task["status"] = TaskStatus(task["status"])
        deserializable_task["priority"] = Priority(task["priority"])
        deserializable_task["assigned_to"] = list(task.get("assigned_to") or [])
        deserializable_task["start_date"] = time.datetime_from_str_optional(
            task.get("start_date")
        )
        deserializable_task["due_date"] = time.datetime_from_str_optional(
            task.get("due_date")
        )
        deserializable_task["created"] = time.datetime_from_str(task["created"])
        deserializable_task["updated"] = time.datetime_from_str(task["updated"])
        return cast(Task, deserializable_task)

    def save_new_task(self, task: Task) -> EntityId:
        self.is_dirty = True

        task["id"] = generate_entity_id()

        # Deduplicate assignees
        task["assigned_to"] = list(dict.fromkeys(task["assigned_to"]))

        self.tasks.append(task)
        self._dirty_ids.add(task["id"])

        self._project_repo.add_project(task["project_id"])

        return task["id"]

    def get_task(self, id: EntityId) -> Task:
        return deepcopy([task for task in self.tasks if task["id"] == id][0])

    def project_exists(self, project_id: str) -> bool:
        return self._project_repo.project_exists(project_id)

    def get_tasks_by_project(self, project_id: str) -> list[Task]:
        return deepcopy(
            [task for task in self.tasks if task["project_id"] == project_id]
        )


TASK_REPO = TaskRepository()
