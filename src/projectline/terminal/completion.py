# SPDX-License-Identifier: MIT

from projectline.repository.project import PROJECT_REPO


def complete_project(incomplete: str) -> list[str]:
    """Return list of available projects for shell completion."""

    all_projects = PROJECT_REPO.get_all_projects()
    return [project for project in all_projects if project.startswith(incomplete)]
