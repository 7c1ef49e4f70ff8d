# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from projectline import configuration
from projectline.model.project import Projects

logger = logging.getLogger(__name__)


class ProjectRepository:
    """
    Known project ids, kept in a single `projects.yaml` document.

    A project exists once it is added explicitly or a task is saved for it.
    """

    def __init__(self) -> None:
        self._projects: Optional[set[str]] = None
        self.is_dirty = False

    @property
    def projects(self) -> set[str]:
        if self._projects is None:
            self._projects = self.__load_data()
        return self._projects

    def __load_data(self) -> set[str]:
        if not configuration.DATA_PROJECTS_PATH.is_file():
            logger.debug(
                "no project file at %s, starting empty", configuration.DATA_PROJECTS_PATH
            )
            return set()

        projects_data = load(configuration.DATA_PROJECTS_PATH.read_text(), Loader=Loader)
        if projects_data is None:
            return set()
        if not isinstance(projects_data, dict) or not isinstance(
            projects_data.get("projects"), list
        ):
            raise ValueError(
                f"{configuration.DATA_PROJECTS_PATH} has no 'projects' list"
            )
        return {str(project) for project in projects_data["projects"]}

    def __save_data(self, projects: set[str]) -> None:
        projects_data: Projects = {"projects": sorted(projects)}
        configuration.DATA_PROJECTS_PATH.write_text(dump(projects_data, Dumper=Dumper))

    def flush(self) -> bool:
        if self._projects is not None and self.is_dirty:
            self.__save_data(self._projects)
            self.is_dirty = False
            return True
        return False

    def add_project(self, project_id: str) -> bool:
        """Register a project id; returns False when it was already known."""
        if project_id in self.projects:
            return False
        self.projects.add(project_id)
        self.is_dirty = True
        logger.debug("added project %s", project_id)
        return True

    def get_all_projects(self) -> list[str]:
        return sorted(self.projects)

    def project_exists(self, project_id: str) -> bool:
        return project_id in self.projects


PROJECT_REPO = ProjectRepository()
