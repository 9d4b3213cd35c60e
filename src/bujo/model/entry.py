# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.entity_id import EntityId


class Entry(TypedDict):
    id: EntityId
    content: str
    bullet_type: BulletType
    status: Optional[TaskStatus]  # set for tasks only
    created: pendulum.DateTime  # local time
    date: pendulum.Date
    tags: list[str]
    priority: Optional[int]
