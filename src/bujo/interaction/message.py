# SPDX-License-Identifier: MIT

from collections import deque
from typing import Iterator

MESSAGE_CAPACITY = 5


class MessageQueue:
    """Most recent user-facing messages; the oldest is dropped when full."""

    def __init__(self, capacity: int = MESSAGE_CAPACITY) -> None:
        self._messages: deque[str] = deque(maxlen=capacity)

    def push(self, message: str) -> None:
        self._messages.append(message)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return len(self._messages) > 0

    def to_list(self) -> list[str]:
        return list(self._messages)
