import argparse
import os

from util.config import read_yaml
from util.io.setup import setupOutputDirs
from util.intersections import runIntersections, writeResults
from util.logging.segment_intersect_logger import (
    disable_logging,
    enable_logging,
    get_stats,
)


def main(
    config_setting,
    save_name=None,
    tangent_tol=None,
    log_file=None,
    do_plot=None,
    config_dir="config",
):

    # Read config
    config = read_yaml(
        os.path.join(config_dir, f"{config_setting}.yaml"),
        base_path=os.path.join(config_dir, "base.yaml"),
    )

    # Test settings
    save_name = save_name if save_name is not None else config["TEST"]["SAVE_NAME"]
    cases = config["CASES"]

    # Geometry settings
    tangent_tol = (
        tangent_tol if tangent_tol is not None else config["GEOMS"]["TANGENT_TOL"]
    )

    # Output settings
    do_plot = do_plot if do_plot is not None else config["PLOT"]["DO_PLOT"]
    log_file = log_file if log_file is not None else config["LOGGING"]["LOG_FILE"]

    # Setup
    output_dirs = setupOutputDirs(save_name)

    # -----

    if log_file:
        enable_logging(log_file=os.path.join(output_dirs["logs"], log_file))

    print(f"Running {len(cases)} cases (tangent_tol = {tangent_tol})")
    try:
        results = runIntersections(
            cases,
            tangent_tol=tangent_tol,
            output_dirs=output_dirs,
            do_plot=do_plot,
        )
        if log_file:
            print(get_stats())
    finally:
        if log_file:
            disable_logging()

    writeResults(results, os.path.join(output_dirs["base"], "results.txt"))

    num_failed = sum(1 for r in results if "error" in r)
    print(f"Done: {len(results) - num_failed} succeeded, {num_failed} failed")

    return results


def build_parser():
    parser = argparse.ArgumentParser(description="Circle/segment intersection cases.")
    parser.add_argument("--config", type=str, help="config", default="circint")
    parser.add_argument("--save_name", type=str, help="save_name", required=False)
    parser.add_argument(
        "--tangent_tol", type=float, help="tangency tolerance", required=False
    )
    parser.add_argument(
        "--log_file", type=str, help="log segmentIntersect calls", required=False
    )
    parser.add_argument(
        "--plot", action="store_true", help="plot each case", default=None
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    main(
        config_setting=args.config,
        save_name=args.save_name,
        tangent_tol=args.tangent_tol,
        log_file=args.log_file,
        do_plot=args.plot,
    )
