# SPDX-License-Identifier: MIT

from pathlib import Path

from bizcal import configuration
from bizcal.repository.reference import ReferenceRepository


class ProjectRepository(ReferenceRepository):
    collection = "projects"

    def _path(self) -> Path:
        return configuration.DATA_PROJECTS_PATH


PROJECT_REPO = ProjectRepository()
