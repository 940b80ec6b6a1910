# SPDX-License-Identifier: MIT

from bizcal.repository.project import PROJECT_REPO
from bizcal.terminal.reference import build_reference_app

app = build_reference_app(PROJECT_REPO, "project")
