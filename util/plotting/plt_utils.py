import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from main.geoms.geoms import lerp


def plotIntersection(circle, pa, pb, intersects, save_path, title=None, extend=0.25):
    """
    Plot a circle, the segment pa-pb and its intersection points.

    The line through the segment is drawn dashed past both endpoints, since
    intersection points are not restricted to the segment itself.
    """
    theta = np.linspace(0, 2 * np.pi, 200)
    cx, cy = circle.center
    r = circle.radius

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(cx + r * np.cos(theta), cy + r * np.sin(theta), color="tab:blue", label="circle")
    ax.plot([cx], [cy], marker="+", color="tab:blue", markersize=10)

    # Extended line, then the segment on top of it
    line_start = lerp(pa, pb, -extend)
    line_end = lerp(pa, pb, 1 + extend)
    ax.plot(
        [line_start[0], line_end[0]],
        [line_start[1], line_end[1]],
        ls="--",
        color="gray",
        linewidth=1,
    )
    ax.plot([pa[0], pb[0]], [pa[1], pb[1]], marker="o", color="black", label="segment")

    if intersects:
        xs = [p[0] for p in intersects]
        ys = [p[1] for p in intersects]
        ax.scatter(xs, ys, color="tab:red", zorder=3, label=f"{len(intersects)} intersection(s)")

    ax.set_aspect("equal")
    ax.grid(True, ls="-", alpha=0.3)
    ax.legend(loc="best")
    if title is not None:
        ax.set_title(title)
    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def plotResidualHistogram(residuals, save_path, title="Distance residuals"):
    """Histogram of | |X - center| - radius | over all intersection points."""
    residuals = np.asarray(residuals, dtype=float)
    if residuals.size == 0:
        print("No residuals to plot")
        return
    # Exact hits would vanish on a log axis
    residuals = np.maximum(residuals, np.finfo(float).tiny)

    plt.figure(figsize=(8, 6))
    bins = np.logspace(np.log10(residuals.min()), np.log10(residuals.max()) + 1e-12, 40)
    plt.hist(residuals, bins=bins, color="tab:blue", alpha=0.8)
    plt.xscale("log")
    plt.xlabel("| ||X - c|| - r |", fontsize=14)
    plt.ylabel("Count", fontsize=14)
    plt.title(title, fontsize=16, fontweight="bold")
    plt.grid(True, which="both", ls="-", alpha=0.3)
    plt.tight_layout()
    plt.savefig(save_path, dpi=300, bbox_inches="tight")
    plt.close()
