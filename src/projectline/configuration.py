# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "projectline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"
LOG_PATH: Path = DATA_PATH / "projectline.log"


class Configuration(TypedDict):
    current_user_id: Optional[str]
    data_path: Optional[str]
    show_header: bool
    default_sort_option: str
    default_sort_ascending: bool
    sort_title_ignore_case: NotRequired[bool]


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_PROJECTS_PATH, DATA_TASKS_DIR, LOG_PATH

    DATA_PATH = data_path
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"
    DATA_TASKS_DIR = DATA_PATH / "tasks"
    LOG_PATH = DATA_PATH / "projectline.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
