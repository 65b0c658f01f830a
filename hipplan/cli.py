"""Command line entry: run the planning steps on given measurements."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from hipplan.intake import AgeCheck, AgeNotSupportedError
from hipplan.planner import Planner, PlanningError, Step


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hipplan",
        description="Plan a pelvic osteotomy from radiograph measurements.",
    )
    parser.add_argument("--age", type=int, required=True, help="patient age in years")
    parser.add_argument("--sphericity", type=float, default=0.0, help="femoral head sphericity index")
    parser.add_argument("--diameter", type=float, default=0.0, help="femoral head diameter")
    parser.add_argument("--angle-a", type=float, default=0.0, help="support surface angle A")
    parser.add_argument("--angle-b", type=float, default=0.0, help="support surface angle B")
    parser.add_argument("--icas", type=float, default=0.0, help="congruence index ICAS")
    parser.add_argument("--isa", type=float, default=0.0, help="acetabular sphericity index ISA")
    parser.add_argument("--angle-c", type=float, default=0.0, help="rotation angle C")
    parser.add_argument("--coefficient", type=float, default=0.0, help="acetabular coefficient")
    parser.add_argument("--lateral-tilt", type=float, default=0.0, help="lateral tilt degree")
    parser.add_argument("--anterior-tilt", type=float, default=0.0, help="anterior tilt degree")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Walk through the planning steps and print the conclusion."""
    args = _parser().parse_args(argv)
    planner = Planner()
    try:
        AgeCheck(args.age).submit()
        planner.record_sphericity(args.sphericity, args.diameter)
        planner.record_support_angles(args.angle_a, args.angle_b)
        planner.record_congruence(args.icas, args.isa)
        planner.record_rotation(args.angle_c)
        planner.record_coefficient(args.coefficient)
        if planner.next_after_coefficient() is Step.LATERAL_TILT:
            planner.record_lateral_tilt(args.lateral_tilt)
        planner.finish(args.anterior_tilt)
    except (AgeNotSupportedError, PlanningError) as error:
        print(error, file=sys.stderr)
        return 1
    print(planner.conclusion.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())