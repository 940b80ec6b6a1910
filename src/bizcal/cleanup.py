# SPDX-License-Identifier: MIT

import atexit

from bizcal.repository.client import CLIENT_REPO
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.repository.project import PROJECT_REPO


def flush() -> None:
    # Events are written through on every change; only these stores batch
    CONFIGURATION_REPO.flush()
    PROJECT_REPO.flush()
    CLIENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
