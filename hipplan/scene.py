"""A drawing surface on which measurements are placed with mouse gestures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from hipplan.geometry import (
    POINT_HALF_SIZE,
    Arrow,
    ArrowType,
    Point,
    Position,
    ValueField,
    distance,
)

SCENE_SIZE = 5000
IMAGE_Z = -2000.0
RED = 0xFF0000


class SceneState(IntEnum):
    """Which tool is active and how far its gesture has progressed."""

    NONE = 0
    LINE = 1
    LINE_START = 2
    ANGLE = 3
    ANGLE_START = 4
    ANGLE_MIDDLE = 5
    CIRCLE = 6
    CIRCLE_START = 7


_DRAWING = (
    SceneState.LINE_START,
    SceneState.ANGLE_START,
    SceneState.ANGLE_MIDDLE,
    SceneState.CIRCLE_START,
)


@dataclass(frozen=True)
class ImagePlacement:
    """Size and top-left position of the background image."""

    width: int
    height: int
    x: int
    y: int


class Scene:
    """Holds the image, the points and the arrows drawn over it."""

    def __init__(self, ratio: float = 1.0) -> None:
        self.width = SCENE_SIZE
        self.height = SCENE_SIZE
        self.ratio = ratio
        self.state = SceneState.NONE
        self.color = RED
        self.field: Optional[ValueField] = None
        self.image: Optional[ImagePlacement] = None
        self.points: list[Point] = []
        self.arrows: list[Arrow] = []
        self.preview_line: Optional[tuple[Position, Position]] = None
        self.preview_circle: Optional[tuple[float, float, float, float]] = None
        self.last_point: Optional[Point] = None
        self.selected: Optional[Point] = None
        self._drag_from: Optional[Position] = None

    def set_image(self, width: int, height: int) -> ImagePlacement:
        """Place an image of the given size at the centre of the scene."""
        centre = SCENE_SIZE // 2
        self.image = ImagePlacement(width, height, centre - width // 2, centre - height // 2)
        return self.image

    def create_point(self, x: float, y: float) -> Point:
        point = Point(x, y, scene=self)
        self.points.append(point)
        return point

    def create_arrow(self, start: Point, end: Point, arrow_type: ArrowType) -> Arrow:
        arrow = Arrow(start, end, self.ratio, arrow_type, self.color, self.field)
        start.add_arrow(arrow)
        end.add_arrow(arrow)
        self.arrows.append(arrow)
        arrow.update_position()
        return arrow

    def remove_item(self, item: Union[Point, Arrow]) -> None:
        """Take a point or an arrow off the scene."""
        collection = self.points if isinstance(item, Point) else self.arrows
        if item in collection:
            collection.remove(item)

    def select_tool(self, state: SceneState, color: int, field: Optional[ValueField]) -> None:
        """Arm a drawing tool, its colour and the field it reports to."""
        self.state = SceneState(state)
        self.color = color
        self.field = field

    def mouse_press(self, x: float, y: float) -> None:
        state = self.state
        if state in (SceneState.LINE, SceneState.ANGLE, SceneState.CIRCLE):
            self.last_point = self.create_point(x, y)
            self.preview_line = ((x, y), (x, y))
            if state is SceneState.LINE:
                self.state = SceneState.LINE_START
            elif state is SceneState.ANGLE:
                self.state = SceneState.ANGLE_START
            else:
                radius = int(distance(self.last_point.pos, (x, y)))
                self.preview_circle = (x - radius, y - radius, radius, radius)
                self.state = SceneState.CIRCLE_START
        elif state is SceneState.ANGLE_MIDDLE:
            point = self.create_point(x, y)
            self.preview_line = None
            self.create_arrow(self.last_point, point, ArrowType.ANGLE)
            self.last_point = point
            self.state = SceneState.NONE
        elif state is SceneState.NONE:
            self.selected = self._point_at(x, y)
            self._drag_from = (x, y) if self.selected is not None else None

    def mouse_move(self, x: float, y: float) -> None:
        if self.state in _DRAWING and self.preview_line is not None:
            origin = self.preview_line[0]
            self.preview_line = (origin, (x, y))
            if self.state is SceneState.CIRCLE_START:
                radius = int(distance(origin, (x, y)))
                self.preview_circle = (
                    origin[0] - radius,
                    origin[1] - radius,
                    2 * radius,
                    2 * radius,
                )
        elif (
            self.state is SceneState.NONE
            and self.selected is not None
            and self._drag_from is not None
        ):
            dx, dy = x - self._drag_from[0], y - self._drag_from[1]
            self._drag_from = (x, y)
            self.selected.move_to(self.selected.x + dx, self.selected.y + dy)

    def mouse_release(self, x: float, y: float) -> None:
        if self.state in _DRAWING and self.preview_line is not None:
            point = self.create_point(x, y)
            self.preview_line = None
            self.preview_circle = None
            start, self.last_point = self.last_point, point

            if self.state is SceneState.LINE_START:
                self.create_arrow(start, point, ArrowType.LINE)
            elif self.state is SceneState.CIRCLE_START:
                self.create_arrow(start, point, ArrowType.CIRCLE)
            else:
                self.create_arrow(start, point, ArrowType.ANGLE)

            if self.state is SceneState.ANGLE_START:
                self.preview_line = ((x, y), (x, y))
                self.state = SceneState.ANGLE_MIDDLE
            else:
                self.state = SceneState.NONE
        self._drag_from = None

    def clear(self) -> None:
        """Remove the image and everything drawn; the active tool is kept."""
        self.image = None
        self.points.clear()
        self.arrows.clear()
        self.preview_line = None
        self.preview_circle = None
        self.last_point = None
        self.selected = None
        self._drag_from = None

    def _point_at(self, x: float, y: float) -> Optional[Point]:
        for point in reversed(self.points):
            if abs(point.x - x) <= POINT_HALF_SIZE and abs(point.y - y) <= POINT_HALF_SIZE:
                return point
        return None