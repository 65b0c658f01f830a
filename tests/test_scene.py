import pytest

from hipplan.geometry import ArrowType, ValueField, distance, format_number
from hipplan.scene import Scene, SceneState

YELLOW = 0xF2FF66


@pytest.fixture
def scene():
    return Scene()


def test_image_is_centred(scene):
    placement = scene.set_image(1000, 600)
    assert placement.x + 1000 // 2 == 2500
    assert placement.y + 600 // 2 == 2500
    assert scene.image == placement


def test_line_gesture(scene):
    field = ValueField()
    scene.select_tool(SceneState.LINE, YELLOW, field)
    scene.mouse_press(100, 100)
    assert scene.state is SceneState.LINE_START
    scene.mouse_move(150, 100)
    assert scene.preview_line == ((100, 100), (150, 100))
    scene.mouse_release(200, 100)
    assert scene.state is SceneState.NONE
    assert scene.preview_line is None
    assert len(scene.points) == 2
    (arrow,) = scene.arrows
    assert arrow.arrow_type is ArrowType.LINE
    assert arrow.color == YELLOW
    assert field.value == 100


def test_ratio_scales_lengths():
    scene = Scene(ratio=0.5)
    field = ValueField()
    scene.select_tool(SceneState.LINE, YELLOW, field)
    scene.mouse_press(0, 0)
    scene.mouse_release(0, 80)
    assert field.value == 80 * 0.5
    assert scene.arrows[0].label == format_number(field.value) + "px"


def test_circle_gesture(scene):
    field = ValueField()
    scene.select_tool(SceneState.CIRCLE, YELLOW, field)
    scene.mouse_press(500, 500)
    assert scene.state is SceneState.CIRCLE_START
    scene.mouse_move(530, 540)
    x, y, w, h = scene.preview_circle
    radius = int(distance((500, 500), (530, 540)))
    assert (x, y, w, h) == (500 - radius, 500 - radius, 2 * radius, 2 * radius)
    scene.mouse_release(530, 540)
    assert scene.preview_circle is None
    assert scene.arrows[0].arrow_type is ArrowType.CIRCLE
    assert field.value == 2 * distance((500, 500), (530, 540))


def test_angle_gesture(scene):
    field = ValueField()
    scene.select_tool(SceneState.ANGLE, YELLOW, field)
    scene.mouse_press(110, 100)
    scene.mouse_release(100, 100)
    assert scene.state is SceneState.ANGLE_MIDDLE
    assert scene.preview_line == ((100, 100), (100, 100))
    scene.mouse_press(100, 110)
    assert scene.state is SceneState.NONE
    assert len(scene.arrows) == 2
    assert all(a.arrow_type is ArrowType.ANGLE for a in scene.arrows)
    assert field.value == 90
    assert scene.arrows[0].label == scene.arrows[1].label


def test_move_without_gesture_does_nothing(scene):
    scene.select_tool(SceneState.LINE, YELLOW, None)
    scene.mouse_move(10, 10)
    scene.mouse_release(10, 10)
    assert scene.points == []
    assert scene.state is SceneState.LINE


def test_drag_point_updates_arrow(scene):
    field = ValueField()
    scene.field = field
    start = scene.create_point(0, 0)
    end = scene.create_point(50, 50)
    arrow = scene.create_arrow(start, end, ArrowType.LINE)
    scene.mouse_press(50, 50)
    assert scene.selected is end
    scene.mouse_move(80, 90)
    assert end.pos == (80, 90)
    assert arrow.line == ((0, 0), (80, 90))
    assert field.value == distance((0, 0), (80, 90))
    scene.mouse_release(80, 90)
    scene.mouse_move(200, 200)
    assert end.pos == (80, 90)


def test_create_arrow_attaches_to_both_points(scene):
    p = scene.create_point(0, 0)
    q = scene.create_point(30, 0)
    arrow = scene.create_arrow(p, q, ArrowType.LINE)
    assert p.arrows == [arrow]
    assert q.arrows == [arrow]
    p.remove_arrows()
    assert scene.arrows == []
    assert q.arrows == []


def test_clear_removes_everything(scene):
    scene.set_image(200, 200)
    scene.select_tool(SceneState.LINE, YELLOW, None)
    scene.mouse_press(1, 1)
    scene.mouse_release(20, 20)
    scene.clear()
    assert scene.points == []
    assert scene.arrows == []
    assert scene.image is None
    assert scene.last_point is None