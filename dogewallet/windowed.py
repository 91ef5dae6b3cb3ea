"""Selection of a window of rows, by position or by a role value."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class WindowFilter:
    """Accepts rows whose position, or role value, falls in a window."""

    def __init__(
        self,
        filter_role: Hashable | None = None,
        window_size: int = 0,
        window_begin: int = 0,
    ) -> None:
        self.filter_role = filter_role
        self.window_size = window_size
        self.window_begin = window_begin

    def _in_window(self, value: int) -> bool:
        return self.window_begin <= value < self.window_begin + self.window_size

    def accepts_row(self, row: int, role_value: Any = None) -> bool:
        """Whether a row is inside the window.

        Without a filter role the row position is tested; otherwise the
        role value, read as an integer, is.
        """
        if self.window_size == 0:
            return False
        if self.filter_role is None:
            return self._in_window(row)
        return self._in_window(_to_int(role_value))

    def filter(self, rows: Iterable[Any]) -> list[Any]:
        """The rows inside the window, in their original order.

        With a filter role, each row is indexed by that role to read its value.
        """
        accepted = []
        for position, item in enumerate(rows):
            value = None if self.filter_role is None else item[self.filter_role]
            if self.accepts_row(position, value):
                accepted.append(item)
        return accepted