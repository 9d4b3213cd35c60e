# SPDX-License-Identifier: MIT

from enum import StrEnum


class BulletType(StrEnum):
    TASK = "task"
    EVENT = "event"
    NOTE = "note"


class TaskStatus(StrEnum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    MIGRATED = "migrated"
    SCHEDULED = "scheduled"
    IRRELEVANT = "irrelevant"
