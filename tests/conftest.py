# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pendulum
import pytest
from yaml import dump

from projectline import configuration
from projectline.model.timeline import TimelineSortOption
from projectline.repository.configuration import CONFIGURATION_REPO
from projectline.repository.project import PROJECT_REPO
from projectline.repository.task import TASK_REPO

from .builders import NOW


@pytest.fixture()
def now() -> pendulum.DateTime:
    return NOW


@pytest.fixture()
def clock() -> Callable[[], pendulum.DateTime]:
    """Deterministic clock for the timeline store."""
    return lambda: NOW


@pytest.fixture()
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point every path and repository singleton at a fresh temp directory.

    Writes a default config file and empty data files, the same layout
    initialize() creates.
    """
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    (data_path / "tasks").mkdir(parents=True)

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_PROJECTS_PATH", data_path / "projects.yaml")
    monkeypatch.setattr(configuration, "DATA_TASKS_DIR", data_path / "tasks")
    monkeypatch.setattr(configuration, "LOG_PATH", data_path / "projectline.log")

    (config_path / "config.yaml").write_text(
        dump(
            {
                "current_user_id": None,
                "data_path": None,
                "show_header": True,
                "default_sort_option": str(TimelineSortOption.START_DATE),
                "default_sort_ascending": True,
                "sort_title_ignore_case": False,
            }
        )
    )
    (data_path / "projects.yaml").write_text(dump({"projects": []}))

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(PROJECT_REPO, "_projects", None)
    monkeypatch.setattr(PROJECT_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(TASK_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_dirty_ids", set())

    root = logging.getLogger()
    handlers = list(root.handlers)
    yield data_path

    # The CLI callback replaces root handlers; put the previous ones back
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
