import pytest

from geometry import Point
from stairs import QUADRANTS, compute_stairs, find_extremes, partition, quadrant_stairs


def P(x, y):
    return Point(float(x), float(y))


DIAMOND = [P(-10, 0), P(0, -10), P(10, 0), P(0, 10)]


def quadrant(name):
    return next(q for q in QUADRANTS if q.name == name)


def test_extremes_of_square():
    ext = find_extremes([P(0, 0), P(10, 0), P(10, 10), P(0, 10), P(5, 5)])
    assert (ext.left_upper, ext.left_lower) == (P(0, 10), P(0, 0))
    assert (ext.right_upper, ext.right_lower) == (P(10, 10), P(10, 0))
    assert (ext.top_left, ext.top_right) == (P(0, 10), P(10, 10))
    assert (ext.bottom_left, ext.bottom_right) == (P(0, 0), P(10, 0))


def test_extremes_without_ties_share_a_point():
    ext = find_extremes([P(0, 5), P(0, 0), P(0, -5), P(3, 1)])
    assert (ext.left_upper, ext.left_lower) == (P(0, 5), P(0, -5))
    assert ext.right_upper is ext.right_lower
    assert ext.right_upper == P(3, 1)
    assert ext.top_left is ext.top_right
    assert ext.top_left == P(0, 5)


def test_partition_into_quadrants():
    ext = find_extremes(DIAMOND)
    points = DIAMOND + [P(-6, -6), P(6, -6), P(6, 6), P(-6, 6), P(1, 1), P(-3, 0)]
    buckets = partition(points, ext)
    assert buckets == {
        "SW": [P(-6, -6)],
        "SE": [P(6, -6)],
        "NE": [P(6, 6), P(1, 1)],
        "NW": [P(-6, 6)],
    }


def test_quadrant_stairs_filter():
    ext = find_extremes(DIAMOND)
    bucket = [P(-3, -8), P(-4, -6), P(-6, -6), P(-9, -0.5), P(-8, -4), P(-5, -7)]
    # (-9, -0.5) is inside the octagon chord, (-4, -6) does not step down
    assert quadrant_stairs(bucket, quadrant("SW"), ext) == [P(-8, -4), P(-6, -6), P(-5, -7), P(-3, -8)]


@pytest.mark.parametrize("name, bucket, expected", [
    ("SE", [P(9, -2), P(4, -8), P(7, -5)], [P(4, -8), P(7, -5), P(9, -2)]),
    ("NE", [P(2, 9), P(8, 4), P(5, 7)], [P(8, 4), P(5, 7), P(2, 9)]),
    ("NW", [P(-9, 2), P(-4, 8), P(-7, 5)], [P(-4, 8), P(-7, 5), P(-9, 2)]),
])
def test_quadrant_stairs_order(name, bucket, expected):
    ext = find_extremes(DIAMOND)
    assert quadrant_stairs(bucket, quadrant(name), ext) == expected


def test_stairs_of_square():
    points = [P(0, 0), P(10, 0), P(10, 10), P(0, 10), P(5, 5)]
    assert compute_stairs(points) == [P(0, 10), P(0, 0), P(10, 0), P(10, 10)]


def test_stairs_walk_all_quadrants_counter_clockwise():
    points = DIAMOND + [P(-6, -6), P(6, -6), P(6, 6), P(-6, 6), P(1, 1)]
    assert compute_stairs(points) == [
        P(-10, 0), P(-6, -6), P(0, -10), P(6, -6), P(10, 0), P(6, 6), P(0, 10), P(-6, 6),
    ]


def test_stairs_skip_repeated_anchors():
    points = [P(0, 0), P(4, 0), P(0, 3), P(0, 0)]
    assert compute_stairs(points) == [P(0, 3), P(0, 0), P(4, 0)]


def test_stairs_of_single_point():
    assert compute_stairs([P(2, 2), P(2, 2), P(2, 2)]) == [P(2, 2)]
    assert compute_stairs([]) == []


def test_partition_degenerate_octagon_shares_point():
    # all extremes sit on the segment (0, 2) - (3, 0)
    points = [P(2, 1), P(3, 0), P(0, 2)]
    buckets = partition(points, find_extremes(points))
    assert buckets == {"SW": [P(2, 1)], "SE": [], "NE": [P(2, 1)], "NW": []}


def test_stairs_of_degenerate_octagon_keep_vertex():
    assert compute_stairs([P(2, 1), P(3, 0), P(0, 2)]) == [P(0, 2), P(3, 0), P(2, 1)]
