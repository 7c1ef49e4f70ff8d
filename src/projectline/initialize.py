# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from projectline import configuration
from projectline.model.timeline import TimelineSortOption
from projectline.repository.configuration import CONFIGURATION_REPO
from projectline.view.view.views.header import set_show_header


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = {
            "current_user_id": None,
            "data_path": None,
            "show_header": True,
            "default_sort_option": str(TimelineSortOption.START_DATE),
            "default_sort_ascending": True,
            "sort_title_ignore_case": False,
        }
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_PROJECTS_PATH.is_file():
        configuration.DATA_PROJECTS_PATH.touch()
        projects: dict[str, Any] = {"projects": []}
        configuration.DATA_PROJECTS_PATH.write_text(dump(projects, Dumper=Dumper))

    # One file per task
    if not configuration.DATA_TASKS_DIR.is_dir():
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
