# SPDX-License-Identifier: MIT

from bizcal.repository.client import CLIENT_REPO
from bizcal.terminal.reference import build_reference_app

app = build_reference_app(CLIENT_REPO, "client")
