# SPDX-License-Identifier: MIT

from pathlib import Path

from bizcal import configuration
from bizcal.repository.reference import ReferenceRepository


class ClientRepository(ReferenceRepository):
    collection = "clients"

    def _path(self) -> Path:
        return configuration.DATA_CLIENTS_PATH


CLIENT_REPO = ClientRepository()
