# SPDX-License-Identifier: MIT

from timesheettool.repository.project import PROJECT_REPO


def complete_project(incomplete: str) -> list[str]:
    """Return list of known projects for shell completion."""

    all_projects = PROJECT_REPO.get_all_projects()
    return [project for project in all_projects if project.startswith(incomplete)]
