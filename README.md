# hipplan

hipplan helps plan a pelvic osteotomy, a periacetabular osteotomy (PAO), or an
acetabuloplasty for a dysplastic hip.

- **Input:** measurements taken from radiographs.
- **Output:** a written conclusion, in Russian. It names the procedure and the
  degree of correction in each plane.

## Workflow

The planning steps always run in this order:

1. **Age check** (`hipplan.intake.AgeCheck`). `submit()` raises
   `AgeNotSupportedError` if the age is 12 or younger.
2. **Sphericity of the femoral head** (`SphericityForm`).
   - `compute()` returns `diameter / distance * 0.5`.
   - `submit()` returns the index and the diameter.
3. **Okano index** (`OkanoForm`). `compute()` returns `a * b / 100`.
4. **Support-surface angles A and B** (`SupportAnglesForm`).
5. **Congruence** (`CongruenceForm`). `compute()` returns `(ICAS, ISA)`, where:
   - `ISA = depth / (0.5 * radius)`
   - `ICAS = ISA / sphericity`
6. **Rotation angle C** (`hipplan.correction.RotationAngleForm`).
7. **Acetabular coefficient** (`AcetabularCoefficientForm`). `compute()`
   returns `depth / width * 1000`.
8. **Lateral tilt** (`LateralTiltForm`). `compute()` returns `yob + (30 - g)`.
9. **Anterior tilt** (`AnteriorTiltForm`). `compute()` returns `25 - d`.

### The planner

`hipplan.planner.Planner` keeps the collected `Measurements` and tracks the
current `Step`.

- `next_after_coefficient()` decides whether step 8 is needed. Lateral tilt is
  measured when either:
  - ICAS > 1.7 and angle A ≤ 35, or
  - 1.0 ≤ ICAS ≤ 1.7.
- `finish(anterior_tilt)` stores the anterior tilt and picks one of twelve
  conclusions with `choose_conclusion`. The chosen text is shown on the
  `Conclusion` page with the prefix `"Вывод: "`.
- `reset()` returns to the first step. It clears every measurement except the
  head diameter.

### When planning is refused

`choose_conclusion` raises `PlanningError` in two cases:

- ICAS falls outside every supported band.
- 1.0 ≤ ICAS ≤ 1.7 and angle B is 15° or less.

```python
from hipplan.planner import Measurements, choose_conclusion

m = Measurements(icas=1.2, angle_a=30.0, angle_b=20.0, angle_c=25.0,
                 lateral_tilt=12.0, anterior_tilt=10.0)
print(choose_conclusion(m))
```

## Measuring on a scene

Each measuring form holds two radiograph tabs. Each tab has its own
`hipplan.scene.Scene`. The form's `measure_*` methods arm a drawing tool on the
current scene. The tool is linked to one of the form's `ValueField`s.

You draw through the mouse handlers:

- `mouse_press(x, y)`, `mouse_move(x, y)` and `mouse_release(x, y)` draw lines,
  circles and angles.
- Angles take two segments.
- In the idle state, pressing on an existing point and moving the mouse drags
  that point.

Every finished `Arrow` writes its measured value into the linked field:

- lines give a length;
- circles give a diameter;
- angles give an angle.

The helpers `distance`, `angle_abc` and `format_number` live in
`hipplan.geometry`.

## Command line

The `hipplan` command runs the whole walk-through with values given as options.
It prints the conclusion.

```
hipplan --age 30 --diameter 48 --angle-a 30 --angle-b 20 --icas 1.2 \
        --angle-c 25 --lateral-tilt 12 --anterior-tilt 10
```

Options:

- `--age` is required.
- The other options default to 0: `--sphericity`, `--diameter`, `--angle-a`,
  `--angle-b`, `--icas`, `--isa`, `--angle-c`, `--coefficient`,
  `--lateral-tilt`, `--anterior-tilt`.
- `--lateral-tilt` is used only when the planner asks for the lateral tilt step.

If the age is not supported or planning is refused, the command prints the
reason to standard error and exits with status 1.

## What it does not do

- There is no graphical window. Scenes are in-memory models driven by method
  calls.
- Nothing is rendered or displayed.
- Image files are not opened. `set_image` and `load_image` take only the image
  width and height and record where the image sits on the scene.
- Measurements and conclusions are not stored anywhere.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```