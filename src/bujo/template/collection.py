# SPDX-License-Identifier: MIT

from typing import Optional

from bujo.model.collection import Collection
from bujo.model.entity_id import generate_entity_id
from bujo.time import now_local


def get_collection_template(
    name: str, description: Optional[str] = None
) -> Collection:
    return {
        "id": generate_entity_id(),
        "name": name,
        "description": description,
        "entries": [],
        "created": now_local(),
    }
