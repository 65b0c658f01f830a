"""Measurement primitives drawn over a radiograph: points, arrows and angles."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

Position = tuple[float, float]

POINT_HALF_SIZE = 7
DEFAULT_ARROW_COLOR = 0x000000


class ArrowType(Enum):
    """What an arrow measures."""

    LINE = 0
    ANGLE = 1
    CIRCLE = 2


@dataclass
class ValueField:
    """A numeric field that receives measured values."""

    value: float = 0.0
    on_change: Optional[Callable[[float], None]] = field(default=None, repr=False)

    def set_value(self, value: float) -> None:
        """Store a value, notifying the listener when it changes."""
        value = float(value)
        if value == self.value:
            return
        self.value = value
        if self.on_change is not None:
            self.on_change(value)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def angle_abc(a: Position, b: Position, c: Position) -> int:
    """Signed angle ABC at vertex B in whole degrees, in the range -180..180."""
    abx, aby = b[0] - a[0], b[1] - a[1]
    cbx, cby = b[0] - c[0], b[1] - c[1]
    dot = _f32(abx * cbx + aby * cby)
    cross = _f32(abx * cby - aby * cbx)
    alpha = _f32(math.atan2(cross, dot))
    return math.floor(alpha * 180.0 / 3.1415926 + 0.5)


def format_number(value: float) -> str:
    """Format a number with six significant digits, trailing zeros dropped."""
    return f"{value:.6g}"


@dataclass(eq=False)
class Point:
    """A movable square marker that arrows are attached to."""

    x: float = 0.0
    y: float = 0.0
    arrows: list["Arrow"] = field(default_factory=list, repr=False)
    scene: object = field(default=None, repr=False)

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def add_arrow(self, arrow: "Arrow") -> None:
        self.arrows.append(arrow)

    def remove_arrow(self, arrow: "Arrow") -> None:
        """Detach an arrow; an arrow that is not attached is ignored."""
        if arrow in self.arrows:
            self.arrows.remove(arrow)

    def remove_arrows(self) -> None:
        """Detach every arrow from both of its ends and from the scene."""
        for arrow in list(self.arrows):
            arrow.start.remove_arrow(arrow)
            arrow.end.remove_arrow(arrow)
            if self.scene is not None:
                self.scene.remove_item(arrow)

    def move_to(self, x: float, y: float) -> None:
        """Move the point and refresh every attached arrow."""
        self.x = x
        self.y = y
        for arrow in list(self.arrows):
            arrow.update_position()

    def collides_with(self, other: "Point") -> bool:
        span = 2 * POINT_HALF_SIZE
        return abs(self.x - other.x) <= span and abs(self.y - other.y) <= span


class Arrow:
    """A measurement between two points: a length, a diameter or an angle."""

    def __init__(
        self,
        start: Point,
        end: Point,
        ratio: float = 0.0,
        arrow_type: ArrowType = ArrowType.LINE,
        color: int = DEFAULT_ARROW_COLOR,
        field: Optional[ValueField] = None,
    ) -> None:
        self.start = start
        self.end = end
        self.ratio = ratio
        self.arrow_type = arrow_type
        self.color = color
        self.field = field
        self.size = 0.0
        self.circle: Optional[tuple[float, float, float, float]] = None
        self.line: tuple[Position, Position] = (start.pos, end.pos)
        self.label = format_number(self.length()) + "mm"

    def __repr__(self) -> str:
        return (
            f"Arrow({self.arrow_type.name}, start={self.start.pos}, "
            f"end={self.end.pos}, label={self.label!r})"
        )

    def length(self) -> float:
        """Distance between the ends, scaled by the scene ratio."""
        return distance(self.start.pos, self.end.pos) * self.ratio

    def set_value(self, value: float) -> None:
        """Show an angle value on the label."""
        self.label = format_number(value) + " °"

    def update_position(self) -> None:
        """Recompute the line, circle, label and measured value."""
        self.line = (self.start.pos, self.end.pos)
        p1, p2 = self.line

        if self.arrow_type is ArrowType.CIRCLE:
            radius = int(distance(p1, p2))
            self.circle = (p1[0] - radius, p1[1] - radius, 2 * radius, 2 * radius)

        if self.arrow_type is ArrowType.ANGLE:
            self._update_angle()
            return

        self.size = self.length()
        if self.arrow_type is ArrowType.CIRCLE:
            self.size *= 2
        self.label = format_number(self.size) + "px"
        if self.field is not None:
            self.field.set_value(self.size)

    def _update_angle(self) -> None:
        point_a, point_b = self.start, self.end
        if len(point_a.arrows) > 1:
            point_a, point_b = point_b, point_a
        point_c = point_b
        other: Optional[Arrow] = None

        neighbours = point_b.arrows
        if len(neighbours) == 1:
            self.label = format_number(0) + " °"
        else:
            other = next((arrow for arrow in neighbours[:2] if arrow is not self), None)
            if other is not None:
                point_c = other.start if other.start is not point_b else other.end

        value = float(abs(angle_abc(point_a.pos, point_b.pos, point_c.pos)) % 180)
        if self.field is not None:
            self.field.set_value(value)
            value = self.field.value
        if other is not None:
            other.set_value(value)
        self.label = format_number(value) + " °"