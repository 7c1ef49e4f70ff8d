# SPDX-License-Identifier: MIT

import atexit

from projectline.repository.configuration import CONFIGURATION_REPO
from projectline.repository.project import PROJECT_REPO
from projectline.repository.task import TASK_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()
    PROJECT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
