from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .window_graph import WindowKey


@dataclass
class CursorState:
    """Last known cursor position and the windows under it.

    Kept up to date by the hit-testing caller; the window table never
    writes to it.
    """

    position: Tuple[int, int] = (0, 0)
    windows: List[WindowKey] = field(default_factory=list)

    def update(self, position: Tuple[int, int], windows: List[WindowKey]) -> None:
        self.position = (int(position[0]), int(position[1]))
        self.windows = list(dict.fromkeys(windows))

    def clear(self) -> None:
        self.windows = []


__all__ = ["CursorState"]
