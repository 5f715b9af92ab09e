import os

from main.structs.circle import Circle
from util.plotting.plt_utils import plotIntersection


def runIntersections(cases, tangent_tol=0.0, output_dirs=None, do_plot=False):
    """
    Run circle/segment intersection for each configured case.

    Args:
        cases: List of dicts with NAME, CENTER, RADIUS, PA, PB
        tangent_tol: Tolerance passed to Circle.segmentIntersect
        output_dirs: Dictionary of output directories (needed when do_plot)
        do_plot: Whether to plot each successful case

    Returns:
        results: List of dicts, one per case, with either nint/intersects or error
            (a case missing a key is reported as a KeyError and skipped)
    """
    results = []
    for i, case in enumerate(cases):
        name = case.get("NAME", f"case_{i}")
        result = {"name": name}
        try:
            circle = Circle(case["CENTER"], case["RADIUS"])
            intersects, nint = circle.segmentIntersect(
                case["PA"], case["PB"], tangent_tol=tangent_tol
            )
        except (KeyError, ValueError) as e:
            print(f"{name}: {type(e).__name__}: {e}")
            result["error"] = f"{type(e).__name__}: {e}"
            results.append(result)
            continue

        print(f"{name}: nint = {nint}, intersects = {intersects}")
        result["nint"] = nint
        result["intersects"] = intersects
        results.append(result)

        if do_plot:
            plotIntersection(
                circle,
                case["PA"],
                case["PB"],
                intersects,
                os.path.join(output_dirs["plt_cases"], f"{name}.png"),
                title=f"{name} (nint = {nint})",
            )

    return results


def writeResults(results, save_path):
    with open(save_path, "w") as f:
        for result in results:
            if "error" in result:
                f.write(f"{result['name']}: {result['error']}\n")
            else:
                f.write(
                    f"{result['name']}: nint={result['nint']} intersects={result['intersects']}\n"
                )
