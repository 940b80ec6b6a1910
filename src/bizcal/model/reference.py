# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from bizcal.model.entity_id import EntityId


class Reference(TypedDict):
    """A project or client record that events can point at."""

    id: EntityId
    user_id: str
    name: str
    created: pendulum.DateTime
