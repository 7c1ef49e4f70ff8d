# SPDX-License-Identifier: MIT

from projectline.model.task import Priority, Task, TaskStatus
from projectline.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "project_id": "",
        "title": "",
        "description": None,
        "status": TaskStatus.TODO,
        "priority": Priority.MEDIUM,
        "assigned_to": [],
        "start_date": None,
        "due_date": None,
        "created": now,
        "updated": now,
    }
