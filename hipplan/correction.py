"""Correction steps: rotation, acetabular coefficient and the tilt forms."""

from __future__ import annotations

from typing import Callable, Optional

from hipplan.geometry import ValueField
from hipplan.intake import PRIMARY_COLOR, SECONDARY_COLOR, RadiographForm
from hipplan.scene import SceneState

COEFFICIENT_SCALE = 1000
LATERAL_REFERENCE = 30.0
ANTERIOR_REFERENCE = 25.0

Listener = Optional[Callable[[float], None]]


class RotationAngleForm(RadiographForm):
    """Angle C of the acetabulum, reported to a listener as soon as it changes."""

    def __init__(self, on_angle_c: Listener = None) -> None:
        super().__init__()
        self.angle_c_field = ValueField(on_change=on_angle_c)

    @property
    def angle_c(self) -> float:
        return self.angle_c_field.value

    def measure_angle_c(self) -> None:
        self._arm(SceneState.ANGLE, PRIMARY_COLOR, self.angle_c_field)

    def submit(self) -> float:
        """Return the measured angle C."""
        return self.angle_c


class AcetabularCoefficientForm(RadiographForm):
    """Acetabular depth and width give the acetabular coefficient."""

    def __init__(self, on_coefficient: Listener = None) -> None:
        super().__init__()
        self.on_coefficient = on_coefficient
        self.depth_field = ValueField()
        self.width_field = ValueField()
        self.coefficient_field = ValueField()

    @property
    def depth(self) -> float:
        return self.depth_field.value

    @property
    def width(self) -> float:
        return self.width_field.value

    @property
    def coefficient(self) -> float:
        return self.coefficient_field.value

    def measure_depth(self) -> None:
        self._arm(SceneState.LINE, PRIMARY_COLOR, self.depth_field)

    def measure_width(self) -> None:
        self._arm(SceneState.LINE, SECONDARY_COLOR, self.width_field)

    def compute(self) -> float:
        """Depth over width, times a thousand; the listener always hears the result."""
        self.coefficient_field.set_value(self.depth / self.width * COEFFICIENT_SCALE)
        if self.on_coefficient is not None:
            self.on_coefficient(self.coefficient)
        return self.coefficient


class LateralTiltForm(RadiographForm):
    """Angles G and YOB give the degree of lateral tilt."""

    def __init__(self) -> None:
        super().__init__()
        self.g_field = ValueField()
        self.yob_field = ValueField()
        self.tilt_field = ValueField()

    @property
    def g(self) -> float:
        return self.g_field.value

    @property
    def yob(self) -> float:
        return self.yob_field.value

    @property
    def tilt(self) -> float:
        return self.tilt_field.value

    def measure_g(self) -> None:
        self._arm(SceneState.ANGLE, PRIMARY_COLOR, self.g_field)

    def measure_yob(self) -> None:
        self._arm(SceneState.ANGLE, SECONDARY_COLOR, self.yob_field)

    def compute(self) -> float:
        self.tilt_field.set_value(self.yob + (LATERAL_REFERENCE - self.g))
        return self.tilt

    def submit(self) -> float:
        """Return the lateral tilt last computed."""
        return self.tilt


class AnteriorTiltForm(RadiographForm):
    """Angle D gives the degree of anterior tilt."""

    def __init__(self) -> None:
        super().__init__()
        self.d_field = ValueField()
        self.tilt_field = ValueField()

    @property
    def d(self) -> float:
        return self.d_field.value

    @property
    def tilt(self) -> float:
        return self.tilt_field.value

    def measure_d(self) -> None:
        self._arm(SceneState.ANGLE, PRIMARY_COLOR, self.d_field)

    def compute(self) -> float:
        self.tilt_field.set_value(ANTERIOR_REFERENCE - self.d)
        return self.tilt

    def submit(self) -> float:
        """Return the anterior tilt last computed."""
        return self.tilt