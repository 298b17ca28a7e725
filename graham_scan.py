import logging

from geometry import Point, left_turn, validate_points
from stairs import compute_stairs

logger = logging.getLogger(__name__)


def assemble_hull(stairs: list[Point]) -> list[Point]:
    """
    Left-turn-only stack scan over the stairs sequence.

    The first stairs point is on the hull and is appended again at the end,
    so the closing vertex is tested like any other. When the left-turn test
    fails the top is dropped and the same point is retried against the new
    top on the next iteration.
    """
    s0 = stairs[0]
    hull = [s0]

    stairs = stairs + [s0]
    i = 1
    while i < len(stairs):
        pi = stairs[i]
        pl = hull[-1]

        if pl == pi:
            i += 1
            continue

        if len(hull) == 1:
            hull.append(pi)
            i += 1
            continue

        hull.pop()
        pll = hull[-1]
        if left_turn(pll, pl, pi):
            hull.append(pl)
            hull.append(pi)
            i += 1

    # the last point is s0 again, already at the bottom of the stack
    if len(hull) > 1:
        hull.pop()
    return hull


def compute_hull(points: list[Point], validate: bool = True) -> list[Point]:
    """
    Convex hull of a point set using a modified Graham scan,
    where only the left-turn test is used.

    Returns hull vertices in counter-clockwise order, starting at the
    left-upper extreme point. Fewer than 3 points are returned as they are.
    Collinear boundary points are never hull vertices.

    Coordinates must be finite; with `validate` set, non-finite input
    raises InvalidPointError before anything is computed.
    """
    points = list(points)
    if validate:
        validate_points(points)

    if len(points) < 3:
        return points

    stairs = compute_stairs(points)
    if len(stairs) < 3:
        return stairs

    hull = assemble_hull(stairs)
    logger.debug("Hull of %d points has %d vertices", len(points), len(hull))
    return hull
