import numpy as np

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from geometry import Point


def closed_hull_array(hull: list[Point]) -> np.ndarray:
    """
    Hull vertices as an (n + 1, 2) array, first vertex repeated at the end.
    """
    a = np.empty((len(hull) + 1, 2), dtype=float)
    for i, p in enumerate(hull):
        a[i] = p.x, p.y
    a[-1] = a[0]
    return a


def hull_polygon(hull: list[Point], **style) -> Polygon:
    style = {"fill": False, "linewidth": 3, "edgecolor": "r", **style}
    return Polygon(closed_hull_array(hull), closed=True, **style)


def plot_points(points: list[Point], ax: Axes, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes, clr: str = 'r'):
    if not hull:
        return
    if len(hull) >= 3:
        ax.add_patch(hull_polygon(hull, edgecolor=clr))
    else:
        line = closed_hull_array(hull)
        ax.plot(line[:, 0], line[:, 1], c=clr, linewidth=3)
    plot_points(hull, ax, c=clr, s=12, zorder=3)


def save_plot(points: list[Point], hull: list[Point], filename: str, title: str | None = None):
    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot(111)
    plot_points(points, ax, c='b', s=2)
    plot_hull(hull, ax)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)
    if title:
        ax.set_title(title)
    fig.savefig(filename, dpi=150, bbox_inches='tight')
