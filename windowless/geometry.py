from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True, order=True)
class Rectangle:
    """Axis-aligned rectangle in left-top-right-bottom form."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return abs(self.right - self.left)

    @property
    def height(self) -> int:
        return abs(self.bottom - self.top)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def normalized(self) -> "Rectangle":
        left, right = sorted((self.left, self.right))
        top, bottom = sorted((self.top, self.bottom))
        if (left, top, right, bottom) == (self.left, self.top, self.right, self.bottom):
            return self
        return Rectangle(left, top, right, bottom)

    def contains_point(self, x: int, y: int) -> bool:
        rect = self.normalized()
        return rect.left <= x < rect.right and rect.top <= y < rect.bottom

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    def overlaps(self, other: "Rectangle") -> bool:
        return overlaps(self, other)

    def split(self, other: "Rectangle") -> Optional[Tuple["Rectangle", List["Rectangle"]]]:
        return split(self, other)


def overlaps(a: Rectangle, b: Rectangle) -> bool:
    if a.is_empty or b.is_empty:
        return False
    a = a.normalized()
    b = b.normalized()
    # Strict on every side: shared edges or corners carry no area.
    return a.left < b.right and b.left < a.right and a.top < b.bottom and b.top < a.bottom


def split(a: Rectangle, b: Rectangle) -> Optional[Tuple[Rectangle, List[Rectangle]]]:
    """Split ``a`` into its overlap with ``b`` and the pieces outside ``b``.

    Returns ``None`` when the rectangles do not overlap. Otherwise returns
    ``(overlap, remainders)`` where ``remainders`` holds at most four
    rectangles. The overlap and the remainders tile ``a`` with no gaps and
    no double coverage.

    ``a`` is clipped against ``b``'s top, bottom, left and right edges in
    that order; each clip peels off the slice of ``a`` beyond that edge.
    """
    if not overlaps(a, b):
        return None
    b = b.normalized()
    left, top, right, bottom = a.normalized().as_tuple()
    remainders: List[Rectangle] = []

    if top < b.top:
        remainders.append(Rectangle(left, top, right, b.top))
        top = b.top
    if bottom > b.bottom:
        remainders.append(Rectangle(left, b.bottom, right, bottom))
        bottom = b.bottom
    if left < b.left:
        remainders.append(Rectangle(left, top, b.left, bottom))
        left = b.left
    if right > b.right:
        remainders.append(Rectangle(b.right, top, right, bottom))
        right = b.right

    return Rectangle(left, top, right, bottom), remainders


__all__ = ["Rectangle", "overlaps", "split"]
