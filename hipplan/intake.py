"""Intake steps: the age check and the first radiograph measurement forms."""

from __future__ import annotations

from dataclasses import dataclass

from hipplan.geometry import ValueField
from hipplan.scene import Scene, SceneState

TAB_TITLES = ("Рентгенограмма 1", "Рентгенограмма 2")
PRIMARY_COLOR = 0xF2FF66
SECONDARY_COLOR = 0xFF7A83
MIN_SUPPORTED_AGE = 13
CONCLUSION_PREFIX = "Вывод: "


class AgeNotSupportedError(ValueError):
    """Raised when the patient is too young for this planning method."""


@dataclass
class AgeCheck:
    """The opening step: the patient's age decides whether planning may go on."""

    age: int = 0

    def submit(self) -> int:
        """Accept the age, or raise if the age group is not supported."""
        if self.age < MIN_SUPPORTED_AGE:
            raise AgeNotSupportedError(
                "Программа для планирования операции данной возрастной группы "
                "в настоящий момент не подходит (планируется расширить далее "
                "для других возрастных групп)"
            )
        return self.age


class RadiographForm:
    """A form with two radiograph tabs, each holding its own drawing scene."""

    def __init__(self) -> None:
        self.titles = TAB_TITLES
        self.scenes = [Scene() for _ in TAB_TITLES]
        self.current = 0

    def current_scene(self) -> Scene:
        return self.scenes[self.current]

    def select_tab(self, index: int) -> Scene:
        """Make another tab current and return its scene."""
        if not 0 <= index < len(self.scenes):
            raise IndexError(f"no radiograph tab {index}")
        self.current = index
        return self.current_scene()

    def load_image(self, width: int, height: int):
        """Place an image of the given size on the current scene."""
        return self.current_scene().set_image(width, height)

    def clear_scene(self) -> None:
        self.current_scene().clear()

    def _arm(self, state: SceneState, color: int, field: ValueField) -> None:
        self.current_scene().select_tool(state, color, field)


class SphericityForm(RadiographForm):
    """Femoral head diameter and distance give the sphericity index."""

    def __init__(self) -> None:
        super().__init__()
        self.diameter_field = ValueField()
        self.distance_field = ValueField()
        self.index_field = ValueField()

    @property
    def diameter(self) -> float:
        return self.diameter_field.value

    @property
    def distance(self) -> float:
        return self.distance_field.value

    @property
    def index(self) -> float:
        return self.index_field.value

    def measure_diameter(self) -> None:
        self._arm(SceneState.CIRCLE, PRIMARY_COLOR, self.diameter_field)

    def measure_distance(self) -> None:
        self._arm(SceneState.LINE, SECONDARY_COLOR, self.distance_field)

    def compute(self) -> float:
        """Sphericity index: half the ratio of diameter to distance."""
        self.index_field.set_value(self.diameter / self.distance * 0.5)
        return self.index

    def submit(self) -> tuple[float, float]:
        """Return the sphericity index and the head diameter."""
        return self.index, self.diameter


class OkanoForm(RadiographForm):
    """Two distances whose product gives the Okano index."""

    def __init__(self) -> None:
        super().__init__()
        self.a_field = ValueField()
        self.b_field = ValueField()
        self.index_field = ValueField()

    @property
    def a(self) -> float:
        return self.a_field.value

    @property
    def b(self) -> float:
        return self.b_field.value

    @property
    def index(self) -> float:
        return self.index_field.value

    def measure_a(self) -> None:
        self._arm(SceneState.LINE, PRIMARY_COLOR, self.a_field)

    def measure_b(self) -> None:
        self._arm(SceneState.LINE, SECONDARY_COLOR, self.b_field)

    def compute(self) -> float:
        self.index_field.set_value(self.a * self.b / 100)
        return self.index

    def submit(self) -> bool:
        """The Okano step always lets planning continue."""
        return True


class SupportAnglesForm(RadiographForm):
    """Angles A and B of the acetabular support surface."""

    def __init__(self) -> None:
        super().__init__()
        self.angle_a_field = ValueField()
        self.angle_b_field = ValueField()

    @property
    def angle_a(self) -> float:
        return self.angle_a_field.value

    @property
    def angle_b(self) -> float:
        return self.angle_b_field.value

    def measure_angle_a(self) -> None:
        self._arm(SceneState.ANGLE, PRIMARY_COLOR, self.angle_a_field)

    def measure_angle_b(self) -> None:
        self._arm(SceneState.ANGLE, SECONDARY_COLOR, self.angle_b_field)

    def submit(self) -> tuple[float, float]:
        return self.angle_a, self.angle_b


class CongruenceForm(RadiographForm):
    """Acetabular depth and radius give the ISA and ICAS indices."""

    def __init__(self) -> None:
        super().__init__()
        self.sphericity = 0.0
        self.depth_field = ValueField()
        self.radius_field = ValueField()
        self.isa_field = ValueField()
        self.icas_field = ValueField()

    @property
    def isa(self) -> float:
        return self.isa_field.value

    @property
    def icas(self) -> float:
        return self.icas_field.value

    def set_sphericity(self, value: float) -> None:
        self.sphericity = value

    def measure_depth(self) -> None:
        self._arm(SceneState.CIRCLE, PRIMARY_COLOR, self.depth_field)

    def measure_radius(self) -> None:
        self._arm(SceneState.LINE, SECONDARY_COLOR, self.radius_field)

    def compute(self) -> tuple[float, float]:
        """Return (ICAS, ISA) computed from the measured depth and radius."""
        self.isa_field.set_value(self.depth_field.value / (0.5 * self.radius_field.value))
        self.icas_field.set_value(self.isa / self.sphericity)
        return self.icas, self.isa


@dataclass
class Conclusion:
    """The final page showing the planning conclusion."""

    text: str = ""

    def show(self, text: str) -> str:
        self.text = CONCLUSION_PREFIX + text
        return self.text