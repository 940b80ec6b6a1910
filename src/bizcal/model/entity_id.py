# SPDX-License-Identifier: MIT

import uuid

type EntityId = str

SHORT_ID_LENGTH = 8


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def short_id(entity_id: EntityId) -> str:
    """Leading characters of an id, enough to address it from the command line."""
    return entity_id[:SHORT_ID_LENGTH]
