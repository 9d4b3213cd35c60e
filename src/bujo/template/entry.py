# SPDX-License-Identifier: MIT

import pendulum

from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.entity_id import generate_entity_id
from bujo.model.entry import Entry
from bujo.time import now_local


def get_entry_template(
    content: str, bullet_type: BulletType, date: pendulum.Date
) -> Entry:
    return {
        "id": generate_entity_id(),
        "content": content,
        "bullet_type": bullet_type,
        "status": TaskStatus.INCOMPLETE if bullet_type == BulletType.TASK else None,
        "created": now_local(),
        "date": date,
        "tags": [],
        "priority": None,
    }
