# SPDX-License-Identifier: MIT

from projectline.model.task import Priority

# Color constant for completed and cancelled tasks
COMPLETED_TASK_COLOR = "bright_black"

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "dark_orange",
    Priority.URGENT: "red",
}
