# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from bujo.model.entity_id import EntityId
from bujo.model.entry import Entry


class Collection(TypedDict):
    id: EntityId
    name: str
    description: Optional[str]
    entries: list[Entry]  # owned copies, never shared with the journal
    created: pendulum.DateTime
