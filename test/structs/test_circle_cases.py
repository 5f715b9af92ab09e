#!/usr/bin/env python3
"""
Table-driven cases for Circle.segmentIntersect.

Cases extracted with util.logging.analyze_log (--output) can be pasted into
INTERSECT_CASES directly.

Usage:
    # Run all cases with pytest:
    python -m pytest test/structs/test_circle_cases.py -v

    # Run all cases and see detailed output:
    python -m test.structs.test_circle_cases

    # Run a specific case by index:
    python -m test.structs.test_circle_cases 0
"""

import sys
from dataclasses import dataclass
from typing import List, Optional

import pytest

from main.geoms.geoms import getDistance
from main.structs.circle import Circle


@dataclass
class IntersectCase:
    """Represents a single circle/segment query."""

    name: str
    center: List[float]
    radius: float
    pa: List[float]
    pb: List[float]
    tangent_tol: float = 0.0
    expected_nint: Optional[int] = None
    expected_intersects: Optional[List[List[float]]] = None
    tol: float = 1e-4
    description: str = ""


INTERSECT_CASES = [
    IntersectCase(
        name="horizontal_two",
        center=[10.0, 10.0],
        radius=10.0,
        pa=[0.0, 10.0],
        pb=[20.0, 10.0],
        expected_nint=2,
        expected_intersects=[[0.0, 10.0], [20.0, 10.0]],
        tol=1e-17,
        description="Horizontal diameter, endpoints on the circle",
    ),
    IntersectCase(
        name="sloped_increasing_two",
        center=[8.0, 8.0],
        radius=9.0,
        pa=[4.0, 2.0],
        pb=[18.0, 9.0],
        expected_nint=2,
        expected_intersects=[[2.2135, 1.10675], [16.9865, 8.49325]],
        description="Sloped line (increasing)",
    ),
    IntersectCase(
        name="sloped_decreasing_two",
        center=[5.0, -5.0],
        radius=3.0,
        pa=[2.0, 0.0],
        pb=[9.0, -11.5],
        expected_nint=2,
        expected_intersects=[[3.4719, -2.4181], [6.5917, -7.5435]],
        tol=1e-2,
        description="Sloped line (decreasing)",
    ),
    IntersectCase(
        name="vertical_through_center",
        center=[10.0, 5.0],
        radius=5.0,
        pa=[10.0, 10.0],
        pb=[10.0, 0.0],
        expected_nint=2,
        expected_intersects=[[10.0, 10.0], [10.0, 0.0]],
        description="Vertical line through the center",
    ),
    IntersectCase(
        name="horizontal_tangent",
        center=[10.0, 5.0],
        radius=5.0,
        pa=[3.0, 0.0],
        pb=[15.0, 0.0],
        expected_nint=1,
        expected_intersects=[[10.0, 0.0]],
        description="Zero gradient, tangent at the bottom",
    ),
    IntersectCase(
        name="diagonal_tangent",
        center=[4.0, 4.0],
        radius=8 ** 0.5,
        pa=[0.0, 4.0],
        pb=[4.0, 0.0],
        tangent_tol=1e-12,
        expected_nint=1,
        expected_intersects=[[2.0, 2.0]],
        description="Negative gradient, tangent",
    ),
    IntersectCase(
        name="diagonal_miss",
        center=[3.0, 11.0],
        radius=5.0,
        pa=[2.0, 2.0],
        pb=[14.0, 14.0],
        expected_nint=0,
        expected_intersects=[],
        description="Line passes sqrt(32) from the center",
    ),
    IntersectCase(
        name="vertical_miss",
        center=[0.0, 0.0],
        radius=5.0,
        pa=[-6.0, 10.0],
        pb=[-6.0, 9.0],
        expected_nint=0,
        expected_intersects=[],
        description="Vertical line left of the circle",
    ),
]


def run_single_case(case: IntersectCase, verbose: bool = True):
    circ = Circle(case.center, case.radius)
    intersects, nint = circ.segmentIntersect(case.pa, case.pb, tangent_tol=case.tangent_tol)
    if verbose:
        print(f"{case.name}: nint = {nint}")
        print(f"  pa = {case.pa}, pb = {case.pb}")
        print(f"  intersects = {intersects}")
        print(f"  distance to line = {circ.lineDistance(case.pa, case.pb)}")
    return intersects, nint


def check_case(case: IntersectCase, intersects, nint):
    assert len(intersects) == nint
    if case.expected_nint is not None:
        assert nint == case.expected_nint, f"{case.name}: nint {nint} != {case.expected_nint}"
    if case.expected_intersects is not None:
        for got, expected in zip(intersects, case.expected_intersects):
            assert abs(got[0] - expected[0]) <= case.tol, f"{case.name}: {got} != {expected}"
            assert abs(got[1] - expected[1]) <= case.tol, f"{case.name}: {got} != {expected}"
    for p in intersects:
        assert abs(getDistance(p, case.center) - case.radius) <= 1e-9 * max(1.0, case.radius)


@pytest.mark.parametrize("case", INTERSECT_CASES, ids=[c.name for c in INTERSECT_CASES])
def test_intersect_case(case):
    intersects, nint = run_single_case(case, verbose=False)
    check_case(case, intersects, nint)


if __name__ == "__main__":
    if len(sys.argv) > 1:
        selected = [INTERSECT_CASES[int(sys.argv[1])]]
    else:
        selected = INTERSECT_CASES

    num_failed = 0
    for case in selected:
        intersects, nint = run_single_case(case)
        try:
            check_case(case, intersects, nint)
        except AssertionError as e:
            num_failed += 1
            print(f"  FAILED: {e}")
    print(f"\n{len(selected) - num_failed}/{len(selected)} cases passed")
