import math

import pytest

from hipplan.geometry import format_number
from hipplan.planner import (
    LOW_CONGRUENCE_MESSAGE,
    LOW_SUPPORT_ANGLE_MESSAGE,
    Measurements,
    Planner,
    PlanningError,
    Step,
    choose_conclusion,
    conclusion_texts,
)


def test_conclusion_texts_has_twelve_distinct_entries():
    texts = conclusion_texts(Measurements())
    assert len(texts) == 12
    assert len(set(texts)) == 12


def test_conclusion_texts_embed_measured_values():
    m = Measurements(angle_b=42.0, anterior_tilt=17.5, lateral_tilt=8.25)
    texts = conclusion_texts(m)
    assert texts[1].endswith(format_number(m.anterior_tilt))
    assert "Б = " + format_number(m.angle_b) in texts[0]
    assert format_number(m.lateral_tilt) in texts[6]


def test_graft_size_with_no_diameter_is_base_value():
    texts = conclusion_texts(Measurements(icas=0.9))
    assert texts[10].endswith(" 0.1")


@pytest.mark.parametrize(
    "icas, angle_a, angle_b, angle_c, index",
    [
        (2.0, 40.0, 0.0, 25.0, 0),
        (2.0, 40.0, 0.0, 15.0, 1),
        (2.0, 40.0, 0.0, 5.0, 2),
        (2.0, 30.0, 0.0, 25.0, 3),
        (2.0, 35.0, 0.0, 10.0, 4),
        (2.0, 30.0, 0.0, 5.0, 5),
        (1.2, 0.0, 20.0, 21.0, 6),
        (1.7, 0.0, 20.0, 20.0, 7),
        (1.0, 0.0, 20.0, 9.0, 8),
        (0.9, 0.0, 0.0, 30.0, 9),
        (0.88, 0.0, 0.0, 12.0, 10),
        (0.99, 0.0, 0.0, 0.0, 11),
    ],
)
def test_choose_conclusion_branches(icas, angle_a, angle_b, angle_c, index):
    m = Measurements(icas=icas, angle_a=angle_a, angle_b=angle_b, angle_c=angle_c)
    assert choose_conclusion(m) == conclusion_texts(m)[index]


def test_low_support_angle_is_rejected():
    m = Measurements(icas=1.2, angle_b=15.0)
    with pytest.raises(PlanningError) as info:
        choose_conclusion(m)
    assert str(info.value) == LOW_SUPPORT_ANGLE_MESSAGE


@pytest.mark.parametrize("icas", [0.5, 0.995, 0.87])
def test_low_congruence_is_rejected(icas):
    with pytest.raises(PlanningError) as info:
        choose_conclusion(Measurements(icas=icas))
    assert str(info.value) == LOW_CONGRUENCE_MESSAGE


def test_undefined_rotation_gives_empty_conclusion():
    assert choose_conclusion(Measurements(icas=0.9, angle_c=math.nan)) == ""


def test_reset_keeps_head_diameter_only():
    planner = Planner()
    planner.record_sphericity(0.8, 48.0)
    planner.record_support_angles(30.0, 20.0)
    planner.record_congruence(1.2, 0.96)
    planner.reset()
    assert planner.step is Step.HELLO
    assert planner.measurements == Measurements(head_diameter=48.0)


def test_record_methods_advance_steps():
    planner = Planner()
    assert planner.record_sphericity(0.75, 40.0) == 0.75
    assert planner.step is Step.OKANO
    planner.record_support_angles(30.0, 20.0)
    assert planner.step is Step.CONGRUENCE
    planner.record_congruence(1.5, 1.1)
    assert planner.step is Step.ROTATION
    planner.record_rotation(12.0)
    assert planner.step is Step.COEFFICIENT
    planner.record_coefficient(160.0)
    assert planner.measurements.coefficient == 160.0
    planner.record_lateral_tilt(7.0)
    assert planner.step is Step.ANTERIOR_TILT
    assert planner.measurements.lateral_tilt == 7.0


@pytest.mark.parametrize(
    "icas, angle_a, expected",
    [
        (1.8, 35.0, Step.LATERAL_TILT),
        (1.8, 36.0, Step.ANTERIOR_TILT),
        (1.0, 50.0, Step.LATERAL_TILT),
        (1.7, 50.0, Step.LATERAL_TILT),
        (0.9, 10.0, Step.ANTERIOR_TILT),
    ],
)
def test_next_after_coefficient(icas, angle_a, expected):
    planner = Planner()
    planner.record_support_angles(angle_a, 20.0)
    planner.record_congruence(icas, 1.0)
    assert planner.next_after_coefficient() is expected
    assert planner.step is expected


def test_finish_shows_conclusion():
    planner = Planner()
    planner.record_support_angles(30.0, 20.0)
    planner.record_congruence(0.9, 0.8)
    planner.record_rotation(25.0)
    text = planner.finish(12.0)
    assert planner.step is Step.CONCLUSION
    assert planner.measurements.anterior_tilt == 12.0
    assert text == conclusion_texts(planner.measurements)[9]
    assert planner.conclusion.text == "Вывод: " + text


def test_finish_raises_for_unsupported_case():
    planner = Planner()
    planner.record_congruence(0.5, 0.4)
    with pytest.raises(PlanningError):
        planner.finish(5.0)
    assert planner.step is not Step.CONCLUSION
    assert planner.conclusion.text == ""