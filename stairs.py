import logging

from dataclasses import dataclass
from typing import Callable

from geometry import Point, left_turn

logger = logging.getLogger(__name__)


@dataclass
class ExtremeSet:
    left_upper: Point
    left_lower: Point
    right_upper: Point
    right_lower: Point
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point


@dataclass(frozen=True)
class Quadrant:
    """
    One of the four regions outside the extreme octagon.

    `edge` names the two extreme points emitted before the quadrant stairs.
    Candidates are sorted by `sort_key` and walked from the `first` anchor
    towards the `last` anchor; `improves(last, p)` tells whether p moves the
    staircase strictly closer to the terminal anchor.
    """
    name: str
    edge: tuple[str, str]
    first: str
    last: str
    sort_key: Callable[[Point], float]
    descending: bool
    improves: Callable[[Point, Point], bool]


# counter-clockwise traversal order, starting at the left edge
QUADRANTS = (
    Quadrant("SW", ("left_upper", "left_lower"), "left_lower", "bottom_left",
             sort_key=lambda p: p.x, descending=False,
             improves=lambda last, p: p.y < last.y),
    Quadrant("SE", ("bottom_left", "bottom_right"), "bottom_right", "right_lower",
             sort_key=lambda p: p.y, descending=False,
             improves=lambda last, p: p.x > last.x),
    Quadrant("NE", ("right_lower", "right_upper"), "right_upper", "top_right",
             sort_key=lambda p: p.x, descending=True,
             improves=lambda last, p: p.y > last.y),
    Quadrant("NW", ("top_right", "top_left"), "top_left", "left_upper",
             sort_key=lambda p: p.y, descending=True,
             improves=lambda last, p: p.x < last.x),
)


def find_extremes(points: list[Point]) -> ExtremeSet:
    """
    Find the eight extreme points in a single pass.

    Among points sharing the extreme coordinate, the upper/right variant keeps
    the one with the larger secondary coordinate, the lower/left variant the
    one with the smaller.
    """
    first = points[0]
    leu = led = riu = rid = upl = upr = lol = lor = first
    for p in points[1:]:
        if p.x < leu.x:
            leu = led = p
        elif p.x == leu.x:
            if p.y > leu.y:
                leu = p
            if p.y < led.y:
                led = p

        if p.x > riu.x:
            riu = rid = p
        elif p.x == riu.x:
            if p.y > riu.y:
                riu = p
            if p.y < rid.y:
                rid = p

        if p.y > upl.y:
            upl = upr = p
        elif p.y == upl.y:
            if p.x < upl.x:
                upl = p
            if p.x > upr.x:
                upr = p

        if p.y < lol.y:
            lol = lor = p
        elif p.y == lol.y:
            if p.x < lol.x:
                lol = p
            if p.x > lor.x:
                lor = p

    return ExtremeSet(
        left_upper=leu, left_lower=led,
        right_upper=riu, right_lower=rid,
        top_left=upl, top_right=upr,
        bottom_left=lol, bottom_right=lor,
    )


def partition(points: list[Point], ext: ExtremeSet) -> dict[str, list[Point]]:
    """
    Split points lying strictly outside the octagon into quadrant buckets.
    Everything else is interior and dropped.

    The buckets are tested independently: when extreme points coincide the
    octagon degenerates and one point can belong to two quadrants.
    """
    buckets = {q.name: [] for q in QUADRANTS}
    for p in points:
        if p.x > ext.bottom_right.x and p.y < ext.right_lower.y:
            buckets["SE"].append(p)
        if p.x < ext.bottom_left.x and p.y < ext.left_lower.y:
            buckets["SW"].append(p)
        if p.x > ext.top_right.x and p.y > ext.right_upper.y:
            buckets["NE"].append(p)
        if p.x < ext.top_left.x and p.y > ext.left_upper.y:
            buckets["NW"].append(p)
    return buckets


def quadrant_stairs(bucket: list[Point], quadrant: Quadrant, ext: ExtremeSet) -> list[Point]:
    """
    Greedy one-pass filter of a quadrant bucket.

    Keeps every hull vertex of the quadrant, possibly with a few stragglers
    that the hull scan removes later.
    """
    p0 = getattr(ext, quadrant.first)
    pn = getattr(ext, quadrant.last)

    stairs = []
    last = p0
    for p in sorted(bucket, key=quadrant.sort_key, reverse=quadrant.descending):
        if quadrant.improves(last, p) and left_turn(p0, p, pn):
            last = p
            stairs.append(p)
    return stairs


def _emit(res: list[Point], p: Point):
    if not res or res[-1] != p:
        res.append(p)


def compute_stairs(points: list[Point]) -> list[Point]:
    """
    Compute the stairs of all four quadrants, concatenated in
    counter-clockwise order between the extreme points.
    """
    if not points:
        return []

    ext = find_extremes(points)
    buckets = partition(points, ext)
    logger.debug(
        "Extremes %s, bucket sizes %s",
        ext, {name: len(bucket) for name, bucket in buckets.items()},
    )

    res = []
    for quadrant in QUADRANTS:
        for anchor in quadrant.edge:
            _emit(res, getattr(ext, anchor))
        if buckets[quadrant.name]:
            res += quadrant_stairs(buckets[quadrant.name], quadrant, ext)

    if len(res) > 1 and res[0] == res[-1]:
        res.pop()

    logger.debug("Stairs of %d points: %d candidates", len(points), len(res))
    return res
