"""
Random Segment Sweep

Intersects a fixed circle with many random segments and checks three properties
of Circle.segmentIntersect:

- Distance: every returned point X satisfies ||X - center|| == radius up to
  rounding, reported as the max residual | ||X - center|| - radius |.
- Symmetry: swapping the endpoints gives the same set of points.
- Chords: the midpoint of every two-point result lies inside the circle.

USAGE:
    python -m experiments.static.segments --config circint [--num_segments <n>] [--seed <s>]

OUTPUTS:
- plots/<save_name>/plt/segment_residuals.png: histogram of distance residuals
- plots/<save_name>/segment_sweep_results.txt: counts and max residuals
"""

import argparse
import os
import numpy as np

from main.geoms.geoms import getDistance, lerp
from main.structs.circle import Circle
from util.config import read_yaml
from util.initialize.segments import makeRandomSegments
from util.io.setup import setupOutputDirs
from util.plotting.plt_utils import plotResidualHistogram


def _symmetry_error(intersects, swapped):
    # Same points, possibly listed in the other order
    if len(intersects) != len(swapped):
        return float("inf")
    if not intersects:
        return 0.0
    if len(intersects) == 1:
        return getDistance(intersects[0], swapped[0])
    same = max(getDistance(intersects[0], swapped[0]), getDistance(intersects[1], swapped[1]))
    flipped = max(getDistance(intersects[0], swapped[1]), getDistance(intersects[1], swapped[0]))
    return min(same, flipped)


def runSweep(circle, segments, tangent_tol=0.0):
    nint_counts = {0: 0, 1: 0, 2: 0}
    residuals = []
    symmetry_errors = []
    outside_midpoints = 0
    for pa, pb in segments:
        intersects, nint = circle.segmentIntersect(pa, pb, tangent_tol=tangent_tol)
        swapped, _ = circle.segmentIntersect(pb, pa, tangent_tol=tangent_tol)
        nint_counts[nint] += 1
        if nint == 2:
            # Chord midpoint is the closest point of the line to the center
            if not circle.contains(lerp(intersects[0], intersects[1], 0.5)):
                outside_midpoints += 1
        for p in intersects:
            residuals.append(abs(getDistance(p, circle.center) - circle.radius))
        symmetry_errors.append(_symmetry_error(intersects, swapped))

    return {
        "nint_counts": nint_counts,
        "residuals": residuals,
        "max_residual": max(residuals) if residuals else 0.0,
        "max_symmetry_error": max(symmetry_errors) if symmetry_errors else 0.0,
        "outside_midpoints": outside_midpoints,
    }


def main(config_setting, num_segments=None, seed=None, save_name=None):
    config = read_yaml(f"config/{config_setting}.yaml")

    sweep_cfg = config["SWEEP"]
    num_segments = num_segments if num_segments is not None else sweep_cfg["NUM_SEGMENTS"]
    seed = seed if seed is not None else sweep_cfg["SEED"]
    save_name = save_name if save_name is not None else config["TEST"]["SAVE_NAME"]
    tangent_tol = config["GEOMS"]["TANGENT_TOL"]

    output_dirs = setupOutputDirs(save_name)

    circle = Circle(sweep_cfg["CENTER"], sweep_cfg["RADIUS"])
    print(f"Generating {num_segments} random segments (seed = {seed})")
    segments = makeRandomSegments(num_segments, sweep_cfg["BOUNDS"], seed=seed)

    print(f"Intersecting with {circle}")
    results = runSweep(circle, segments, tangent_tol=tangent_tol)

    print(f"nint counts: {results['nint_counts']}")
    print(f"Max distance residual: {results['max_residual']:.3e}")
    print(f"Max symmetry error: {results['max_symmetry_error']:.3e}")
    print(f"Secants with midpoint outside the circle: {results['outside_midpoints']}")
    mean_residual = np.mean(results["residuals"]) if results["residuals"] else 0.0
    print(f"Mean distance residual: {mean_residual:.3e}")

    plotResidualHistogram(
        results["residuals"],
        os.path.join(output_dirs["plt"], "segment_residuals.png"),
        title=f"Distance residuals (radius = {circle.radius})",
    )
    with open(os.path.join(output_dirs["base"], "segment_sweep_results.txt"), "w") as f:
        f.write(f"Segments: {num_segments}\n")
        f.write(f"Seed: {seed}\n")
        f.write(f"nint counts: {results['nint_counts']}\n")
        f.write(f"Max distance residual: {results['max_residual']}\n")
        f.write(f"Max symmetry error: {results['max_symmetry_error']}\n")
        f.write(f"Outside midpoints: {results['outside_midpoints']}\n")

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Random segment sweep.")
    parser.add_argument("--config", type=str, help="config", default="circint")
    parser.add_argument("--num_segments", type=int, help="number of segments", required=False)
    parser.add_argument("--seed", type=int, help="random seed", required=False)
    parser.add_argument("--save_name", type=str, help="save_name", required=False)

    args = parser.parse_args()

    main(
        config_setting=args.config,
        num_segments=args.num_segments,
        seed=args.seed,
        save_name=args.save_name,
    )
