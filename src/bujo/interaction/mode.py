# SPDX-License-Identifier: MIT

from enum import StrEnum

from bujo.model.bullet_type import BulletType


class AppTab(StrEnum):
    DAILY = "daily"
    MONTHLY = "monthly"
    FUTURE = "future"
    COLLECTIONS = "collections"
    SEARCH = "search"


# Tab cycle order, also the order of the 1-5 shortcuts
TAB_ORDER: tuple[AppTab, ...] = (
    AppTab.DAILY,
    AppTab.MONTHLY,
    AppTab.FUTURE,
    AppTab.COLLECTIONS,
    AppTab.SEARCH,
)


def next_tab(tab: AppTab) -> AppTab:
    return TAB_ORDER[(TAB_ORDER.index(tab) + 1) % len(TAB_ORDER)]


def previous_tab(tab: AppTab) -> AppTab:
    return TAB_ORDER[(TAB_ORDER.index(tab) - 1) % len(TAB_ORDER)]


def tab_from_name(name: str) -> AppTab:
    """The tab named by a config value such as "monthly"; Daily if unknown."""
    try:
        return AppTab(name.lower())
    except ValueError:
        return AppTab.DAILY


class AppMode(StrEnum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


class InputMode(StrEnum):
    TASK = "task"
    EVENT = "event"
    NOTE = "note"

    @property
    def bullet_type(self) -> BulletType:
        return BulletType(self.value)
