import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Cursor(Enum):
    """The two measuring cursors."""
    LEFT = "left"
    RIGHT = "right"


@dataclass
class CursorController:
    """Two cursor positions in centimeters on a ruler of `ruler_length` cm.

    Invariant: 0 <= left < right <= ruler_length. Drag candidates that would
    break it are ignored and the previous positions are kept.

    Example:
        cursors = CursorController(ruler_length=30)
        cursors.drag(Cursor.RIGHT, offset=250.0, points_per_cm=37.8)
        cursors.distance  # right - left
    """

    ruler_length: float
    left: float = 3.0
    right: float = 5.0

    # Called with (left, right) after every committed change
    on_change: Optional[Callable[[float, float], None]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.left < self.right <= self.ruler_length:
            raise ValueError(
                f"Cursors must satisfy 0 <= left < right <= {self.ruler_length}, got left={self.left}, right={self.right}"
            )

    @property
    def distance(self) -> float:
        return abs(self.right - self.left)

    def position(self, cursor: Cursor) -> float:
        if cursor is Cursor.LEFT:
            return self.left
        if cursor is Cursor.RIGHT:
            return self.right
        raise ValueError(f"Unknown cursor: {cursor!r}")

    def accepts(self, cursor: Cursor, candidate: float) -> bool:
        """Whether moving `cursor` to `candidate` keeps the invariant."""
        if cursor is Cursor.LEFT:
            return 0 <= candidate < self.right
        if cursor is Cursor.RIGHT:
            return self.left < candidate <= self.ruler_length
        raise ValueError(f"Unknown cursor: {cursor!r}")

    def move(self, cursor: Cursor, candidate: float) -> bool:
        """Move a cursor to `candidate` cm. Returns False (and changes nothing) if rejected."""
        if not self.accepts(cursor, candidate):
            logger.debug("Ignoring %s cursor candidate %.3f (left=%.3f, right=%.3f)", cursor.value, candidate, self.left, self.right)
            return False

        if cursor is Cursor.LEFT:
            self.left = candidate
        else:
            self.right = candidate

        if self.on_change:
            self.on_change(self.left, self.right)
        return True

    def drag(self, cursor: Cursor, offset: float, points_per_cm: float) -> bool:
        """Apply a drag update. `offset` is the pointer position in points from the ruler origin."""
        return self.move(cursor, offset / points_per_cm)

    def drag_left(self, offset: float, points_per_cm: float) -> bool:
        return self.drag(Cursor.LEFT, offset, points_per_cm)

    def drag_right(self, offset: float, points_per_cm: float) -> bool:
        return self.drag(Cursor.RIGHT, offset, points_per_cm)

    def cursor_at(self, value: float, tolerance: float) -> Optional[Cursor]:
        """Cursor within `tolerance` cm of `value`, nearest first (left on a tie)."""
        d_left = abs(value - self.left)
        d_right = abs(value - self.right)
        if min(d_left, d_right) > tolerance:
            return None
        return Cursor.RIGHT if d_right < d_left else Cursor.LEFT

    def set_ruler_length(self, ruler_length: float) -> None:
        """Change the upper bound. Only cursors past the new end are moved."""
        if ruler_length <= 0:
            raise ValueError(f"Ruler length must be positive, got {ruler_length}")
        self.ruler_length = ruler_length
        if self.right <= ruler_length:
            return

        span = self.distance
        self.right = float(ruler_length)
        if self.left >= self.right:
            self.left = max(0.0, self.right - span)
        logger.info("Ruler shrank to %s cm, cursors moved to %.1f-%.1f", ruler_length, self.left, self.right)
        if self.on_change:
            self.on_change(self.left, self.right)
