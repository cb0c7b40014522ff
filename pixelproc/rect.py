"""Rectangles of non-zero width and height."""

from __future__ import annotations


class Rect:
    """A rectangular region with top-left corner at (left, top)."""

    __slots__ = ("_left", "_top", "_width", "_height")

    def __init__(self, left: int, top: int, width: int, height: int) -> None:
        if width <= 0:
            raise ValueError("width must be strictly positive")
        if height <= 0:
            raise ValueError("height must be strictly positive")
        self._left = left
        self._top = top
        self._width = width
        self._height = height

    @staticmethod
    def at(x: int, y: int) -> RectPosition:
        """Start building a rectangle whose top-left corner is (x, y)."""
        return RectPosition(x, y)

    def top(self) -> int:
        """Smallest y-coordinate reached by the rectangle."""
        return self._top

    def left(self) -> int:
        """Smallest x-coordinate reached by the rectangle."""
        return self._left

    def bottom(self) -> int:
        """Greatest y-coordinate reached by the rectangle."""
        return self._top + self._height - 1

    def right(self) -> int:
        """Greatest x-coordinate reached by the rectangle."""
        return self._left + self._width - 1

    def width(self) -> int:
        """Width of the rectangle."""
        return self._width

    def height(self) -> int:
        """Height of the rectangle."""
        return self._height

    def intersect(self, other: Rect) -> Rect | None:
        """Return the overlap with ``other``, or None if they are disjoint."""
        left = max(self._left, other.left())
        top = max(self._top, other.top())
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left + 1, bottom - top + 1)

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point (x, y) lies inside the rectangle."""
        return self._left <= x <= self.right() and self._top <= y <= self.bottom()

    def _key(self) -> tuple[int, int, int, int]:
        return (self._left, self._top, self._width, self._height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Rect(left={self._left}, top={self._top}, "
            f"width={self._width}, height={self._height})"
        )


class RectPosition:
    """Top-left position of a rectangle under construction."""

    __slots__ = ("left", "top")

    def __init__(self, left: int, top: int) -> None:
        self.left = left
        self.top = top

    def of_size(self, width: int, height: int) -> Rect:
        """Return the rectangle at this position with the given size."""
        return Rect(self.left, self.top, width, height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectPosition):
            return NotImplemented
        return (self.left, self.top) == (other.left, other.top)

    def __hash__(self) -> int:
        return hash((self.left, self.top))

    def __repr__(self) -> str:
        return f"RectPosition(left={self.left}, top={self.top})"