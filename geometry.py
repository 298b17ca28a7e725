import math
import numpy as np

from dataclasses import dataclass


class InvalidPointError(ValueError):
    pass


@dataclass(frozen=True)
class Point:
    """
    2-D point. Equality is exact coordinate equality, no tolerance.
    """
    x: float
    y: float

    def __lt__(self, other):
        return self.x < other.x or self.x == other.x and self.y < other.y

    def __str__(self):
        return f"[{self.x},{self.y}]"


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def left_turn(a: Point, b: Point, c: Point) -> bool:
    """
    True iff a -> b -> c turns strictly counter-clockwise.
    Collinear triples are not left turns.
    """
    return cross(a, b, c) > 0


def signed_area(polygon: list[Point]) -> float:
    """
    Shoelace area, positive for counter-clockwise polygons.
    """
    if len(polygon) < 3:
        return 0.0
    x = np.array([p.x for p in polygon], dtype=float)
    y = np.array([p.y for p in polygon], dtype=float)
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def validate_points(points: list[Point]):
    for i, p in enumerate(points):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidPointError(f"Point #{i} has non-finite coordinates: {p}")


def points_from_array(array) -> list[Point]:
    """
    Convert an (n, 2) array-like of coordinates to points.
    """
    array = np.asarray(array, dtype=float).reshape(-1, 2)
    return [Point(float(x), float(y)) for x, y in array]


def format_points(title: str, points: list[Point]) -> str:
    lines = [title, "-" * 16, ""]
    lines += [f"{i + 1}) {p}" for i, p in enumerate(points)]
    return "\n".join(lines) + "\n"


def convex_hull_andrew(points: list[Point]) -> list[Point]:
        """
        Andrew's monotone chain algorithm for convex hull.
        Duplicates and collinear boundary points are dropped.
        Returns vertices in counter-clockwise order. Time complexity: O(n*log(n)).
        """
        points = sorted(set(points))
        if len(points) <= 2:
            return points

        lower = []  # lower hull
        for p in points:
            while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
                lower.pop()
            lower.append(p)

        upper = []  # upper hull
        for p in reversed(points):
            while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
                upper.pop()
            upper.append(p)

        return lower[:-1] + upper[:-1]
