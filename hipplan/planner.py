"""The planning walk-through: collected measurements and the final conclusion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from hipplan.geometry import format_number
from hipplan.intake import Conclusion

_TILT_BY_PELVIC_OSTEOTOMY = (
    "Ацетабулярный коэффициент≥150.\n Показана остеотомия таза+неполная периацетабулярная "
    "остеотомия\n За счет остеотомии таза осуществляется наклон в сагиттальной и "
    "горизонтальной плоскости\n Степень переднего наклона фрагмента равна: "
)
_ROTATION_SHORT = "\n Горизонтальная плоскость.\n Наружная ротация ацетабулярного фрагмента: В - 20°= "
_INCOMPLETE_PAO_LATERAL = (
    "\n За счет неполной ПАО осуществляется латеральный наклон\n Степень латерального "
    "наклона соответствует углу наклона опорной поверхности Б = "
)
_ONLY_PAO = (
    "Ацетабулярный коэффициент≥150.\n Показана неполная периацетабулярная остеотомия (ПАО)\n "
    "Степень латерального наклона соответствует углу наклона опорной поверхности Б = "
)
_ANTERIOR_DEGREE = "\n Степень переднего наклона фрагмента равна: "

_THREE_PLANES = (
    "За счет остеотомии таза осуществляется наклон во фронтальной, сагиттальной и "
    "горизонтальной плоскости\n Во фронтальной плоскости (латеральный наклон)\n Степень "
    "латерального наклона ацетабулярного фрагмента равна: "
)
_TWO_PLANES = (
    "За счет остеотомии таза осуществляется наклон во фронтальной и сагиттальной "
    "плоскости\n Во фронтальной плоскости (латеральный наклон)\n Степень латерального "
    "наклона ацетабулярного фрагмента равна: "
)
_SAGITTAL = "\n В сагиттальной плоскости (передний наклон)\n Степень переднего наклона фрагмента равна: "
_ROTATION_LONG = (
    "\n Горизонтальная плоскость. Наружная ротация ацетабулярного фрагмента: В - 20° = "
)
_ADDITIONAL_LATERAL = (
    "\n За счет неполной ПАО осуществляется дополнительный латеральный наклон\n Степень "
    "дополнительного латерального наклона:  угол  наклона опорной поверхности Б – \n Угол "
    "наклона впадины после остеотомии таза-?"
)

_PELVIC_ONLY = (
    "Ацетабулярный коэффициент≥150.\n Показана остеотомия таза.\n Степень латерального "
    "наклона ацетабулярного фрагмента равна: "
)
_ANTERIOR_SHORT = "\n Степень переднего наклона равна: "
_ROTATION_EQUALS = "\n Наружная ротация ацетабулярного фрагмента:  равна"

_PLASTY_THREE_PLANES = (
    "За счет остеотомии таза осуществляется наклон во фронтальной, сагиттальной и "
    "горизонтальной плоскости.\n Во фронтальной плоскости (латеральный наклон):\n Степень "
    "латерального наклона ацетабулярного фрагмента соответствует величине угла наклона "
    "опорной поверхности Б = "
)
_PLASTY_TWO_PLANES = (
    "За счет остеотомии таза осуществляется наклон во фронтальной и сагиттальной "
    "плоскости.\n Во фронтальной плоскости (латеральный наклон):\n Степень латерального "
    "наклона ацетабулярного фрагмента соответствует величине угла наклона опорной "
    "поверхности Б = "
)
_PLASTY_SAGITTAL = (
    "\n В сагиттальной плоскости (передний наклон): \n Степень переднего наклона "
    "фрагмента равна: "
)
_PLASTY_ROTATION = (
    "\n  Горизонтальная плоскость.\n Наружная ротация ацетабулярного фрагмента:  В - 20° = "
)
_PLASTY_GRAFT_WIDE = (
    "\n За счет ацетабулопластики осуществляется дополнительное  латеральное покрытие "
    "наклон.\n Величина трансплантата:  "
)
_PLASTY_GRAFT = (
    "\n За счет ацетабулопластики осуществляется дополнительное латеральное покрытие "
    "наклон.\n Величина трансплантата: "
)

LOW_SUPPORT_ANGLE_MESSAGE = (
    "Угол наклона опорной поверхности Б менее 15 градусов. Применение программы невозможно"
)
LOW_CONGRUENCE_MESSAGE = (
    "Индекс конгруэнтности ICAS менее 0.8. Применение программы невозможно"
)


class Step(Enum):
    """The pages of the planning walk-through, in order."""

    HELLO = 0
    SPHERICITY = 1
    OKANO = 2
    SUPPORT_ANGLES = 3
    CONGRUENCE = 4
    ROTATION = 5
    COEFFICIENT = 6
    LATERAL_TILT = 7
    ANTERIOR_TILT = 8
    CONCLUSION = 9


class PlanningError(ValueError):
    """Raised when the measurements rule out using this planning method."""


@dataclass
class Measurements:
    """Every value collected while walking through the planning steps."""

    sphericity: float = 0.0
    head_diameter: float = 0.0
    angle_a: float = 0.0
    angle_b: float = 0.0
    icas: float = 0.0
    isa: float = 0.0
    angle_c: float = 0.0
    coefficient: float = 0.0
    lateral_tilt: float = 0.0
    anterior_tilt: float = 0.0


def conclusion_texts(measurements: Measurements) -> tuple[str, ...]:
    """The twelve possible conclusions, filled in with the given measurements."""
    m = measurements
    b = format_number(m.angle_b)
    pn = format_number(m.anterior_tilt)
    ln = format_number(m.lateral_tilt)
    rot_above = format_number(m.angle_c - 20.0)
    rot_below = format_number(15.0 - m.angle_c)
    graft = format_number(0.1 + m.head_diameter * (1.0 - m.icas))

    return (
        _TILT_BY_PELVIC_OSTEOTOMY + pn + _ROTATION_SHORT + rot_above + _INCOMPLETE_PAO_LATERAL + b,
        _ONLY_PAO + b + _ANTERIOR_DEGREE + pn,
        _TILT_BY_PELVIC_OSTEOTOMY + pn + _ROTATION_SHORT + rot_below + _INCOMPLETE_PAO_LATERAL + b,
        _THREE_PLANES + ln + _SAGITTAL + pn + _ROTATION_LONG + rot_above + _ADDITIONAL_LATERAL,
        _TWO_PLANES + ln + _SAGITTAL + pn + _ADDITIONAL_LATERAL,
        _THREE_PLANES + ln + _SAGITTAL + pn + _ROTATION_LONG + rot_below + _ADDITIONAL_LATERAL,
        _PELVIC_ONLY + ln + _ANTERIOR_SHORT + pn + _ROTATION_EQUALS + rot_above,
        _PELVIC_ONLY + ln + _ANTERIOR_SHORT + pn,
        _PELVIC_ONLY + ln + _ANTERIOR_SHORT + pn + _ROTATION_EQUALS + rot_below,
        _PLASTY_THREE_PLANES + b + _PLASTY_SAGITTAL + pn + _PLASTY_ROTATION + rot_above
        + _PLASTY_GRAFT_WIDE + graft,
        _PLASTY_TWO_PLANES + b + _PLASTY_SAGITTAL + pn + _PLASTY_GRAFT + graft,
        _PLASTY_THREE_PLANES + b + _PLASTY_SAGITTAL + pn + _PLASTY_ROTATION + rot_below
        + _PLASTY_GRAFT_WIDE + graft,
    )


def _by_rotation(angle_c: float, above: str, middle: str, below: str) -> str:
    if angle_c > 20.0:
        return above
    if 10.0 <= angle_c <= 20.0:
        return middle
    if angle_c < 10.0:
        return below
    return ""


def choose_conclusion(measurements: Measurements) -> str:
    """Pick the conclusion that the measurements call for, or raise PlanningError."""
    m = measurements
    texts = conclusion_texts(m)

    if m.icas > 1.7:
        if m.angle_a > 35.0:
            return _by_rotation(m.angle_c, texts[0], texts[1], texts[2])
        return _by_rotation(m.angle_c, texts[3], texts[4], texts[5])
    if 1.0 <= m.icas <= 1.7:
        if m.angle_b > 15.0:
            return _by_rotation(m.angle_c, texts[6], texts[7], texts[8])
        raise PlanningError(LOW_SUPPORT_ANGLE_MESSAGE)
    if 0.88 <= m.icas <= 0.99:
        return _by_rotation(m.angle_c, texts[9], texts[10], texts[11])
    raise PlanningError(LOW_CONGRUENCE_MESSAGE)


@dataclass
class Planner:
    """Collects measurements step by step and produces the conclusion."""

    measurements: Measurements = field(default_factory=Measurements)
    step: Step = Step.HELLO
    conclusion: Conclusion = field(default_factory=Conclusion)

    def reset(self) -> None:
        """Return to the first page, forgetting everything but the head diameter."""
        diameter = self.measurements.head_diameter
        self.measurements = Measurements(head_diameter=diameter)
        self.step = Step.HELLO

    def record_sphericity(self, index: float, diameter: float) -> float:
        """Store the sphericity index and head diameter; return the index."""
        self.measurements.sphericity = index
        self.measurements.head_diameter = diameter
        self.step = Step.OKANO
        return index

    def record_support_angles(self, angle_a: float, angle_b: float) -> None:
        self.measurements.angle_a = angle_a
        self.measurements.angle_b = angle_b
        self.step = Step.CONGRUENCE

    def record_congruence(self, icas: float, isa: float) -> None:
        self.measurements.icas = icas
        self.measurements.isa = isa
        self.step = Step.ROTATION

    def record_rotation(self, angle_c: float) -> None:
        self.measurements.angle_c = angle_c
        self.step = Step.COEFFICIENT

    def record_coefficient(self, value: float) -> None:
        self.measurements.coefficient = value

    def record_lateral_tilt(self, value: float) -> None:
        self.measurements.lateral_tilt = value
        self.step = Step.ANTERIOR_TILT

    def next_after_coefficient(self) -> Step:
        """Decide whether the lateral tilt must be measured before the anterior one."""
        m = self.measurements
        if (m.icas > 1.7 and m.angle_a <= 35) or (1.0 <= m.icas <= 1.7):
            self.step = Step.LATERAL_TILT
        else:
            self.step = Step.ANTERIOR_TILT
        return self.step

    def finish(self, anterior_tilt: float) -> str:
        """Store the anterior tilt, choose and show the conclusion, and return it."""
        self.measurements.anterior_tilt = anterior_tilt
        text = choose_conclusion(self.measurements)
        self.conclusion.show(text)
        self.step = Step.CONCLUSION
        return text