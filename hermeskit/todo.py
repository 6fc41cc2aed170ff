"""A to-do list with items that can be completed, edited and filtered by tab."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class Tab(IntEnum):
    """Which items the list shows."""

    ALL = 0
    ACTIVE = 1
    COMPLETED = 2

    def shows(self, item: Item) -> bool:
        """Return whether an item belongs on this tab."""
        if self is Tab.COMPLETED:
            return item.completed
        if self is Tab.ACTIVE:
            return not item.completed
        return True


@dataclass
class Item:
    """One task and whether it is done."""

    text: str
    completed: bool = False


@dataclass
class TodoList:
    """Tasks in the order they were entered, and the tab being shown."""

    items: list[Item] = field(default_factory=list)
    tab: Tab = Tab.ALL

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError("no item at that position")

    def add(self, text: str) -> Item:
        """Add a new, active task at the end.

        A new task would not show on the completed tab, so the list switches
        to showing all tasks first.
        """
        if self.tab is Tab.COMPLETED:
            self.tab = Tab.ALL
        item = Item(text)
        self.items.append(item)
        return item

    def toggle(self, index: int) -> bool:
        """Flip whether the task at ``index`` is done; return the new state."""
        self._check(index)
        item = self.items[index]
        item.completed = not item.completed
        return item.completed

    def take_for_edit(self, index: int) -> str:
        """Remove the task at ``index`` and return its text for editing."""
        self._check(index)
        return self.items.pop(index).text

    def visible(self, tab: Optional[Tab] = None) -> list[tuple[int, Item]]:
        """Return ``(index, item)`` for each task shown on ``tab``.

        Without a tab, the list's current tab is used.
        """
        shown = self.tab if tab is None else Tab(tab)
        return [(i, item) for i, item in enumerate(self.items) if shown.shows(item)]