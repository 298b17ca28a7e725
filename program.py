import argparse
import csv
import logging
import os
import sys
import time

import numpy as np

from geometry import InvalidPointError, Point, convex_hull_andrew, format_points, signed_area, validate_points
from graham_scan import compute_hull
from visualization import save_plot

logger = logging.getLogger(__name__)

DEFAULT_DISTRIBUTION = "uniform"
DEFAULT_SEED = 42

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def andrew_hull(points: list[Point], validate: bool = True) -> list[Point]:
    if validate:
        validate_points(points)
    if len(points) < 3:
        return list(points)
    return convex_hull_andrew(points)


ALGORITHMS = {
    "stairs": compute_hull,
    "andrew": andrew_hull,
}


class PointFileError(ValueError):
    pass


def read_points(filename: str) -> list[Point]:
    """
    Read points from a text file: the number of points on the first line,
    then one "x y" pair per line.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise PointFileError(f"{filename}: expected point count, got {header!r}") from None
        if n < 0:
            raise PointFileError(f"{filename}: negative point count {n}")

        for lineno, line in enumerate(f, start=2):
            if len(points) == n:
                break
            line = line.strip()
            if not line:
                continue
            try:
                x, y = map(float, line.split())
            except ValueError:
                raise PointFileError(f"{filename}:{lineno}: malformed point {line!r}") from None
            points.append(Point(x, y))

    if len(points) < n:
        raise PointFileError(f"{filename}: expected {n} points, found {len(points)}")
    return points


def generate_points(n: int, distribution: str, seed: int = DEFAULT_SEED) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, n)
        r = rng.uniform(0, 500, n) ** 0.5
        xs = 500 + r * np.cos(angle)
        ys = 500 + r * np.sin(angle)
    elif distribution == "gaussian":
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, (n_clusters, 2))
        labels = np.arange(n) % n_clusters
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)
    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def generate_report(points: list[Point], hull: list[Point], source: str, algorithm: str,
                    execution_time: float) -> str:
    report = f"""
{'='*60}
CONVEX HULL REPORT
{'='*60}

INPUT:
------
Source: {source}
Number of points: {len(points)}
Algorithm: {algorithm}

RESULTS:
--------
Hull vertices: {len(hull)}
Hull area: {signed_area(hull):.6f}
Execution time: {execution_time:.6f} seconds

"""
    report += format_points("HULL (counter-clockwise)", hull)
    report += f"""
{'='*60}
Report generated: {time.strftime('%Y-%m-%d %H:%M:%S')}
{'='*60}
"""
    return report


def save_results_csv(filename: str, hull: list[Point]):
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(["Index", "X", "Y"])
        for i, p in enumerate(hull):
            writer.writerow([i, p.x, p.y])


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convex hull of a planar point set")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("input", nargs="?", help="points file: count, then one 'x y' pair per line")
    source.add_argument("--generate", type=int, metavar="N", help="generate N random points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default=DEFAULT_DISTRIBUTION)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="stairs")
    parser.add_argument("--output", help="write a report (.txt) or the hull vertices (.csv)")
    parser.add_argument("--plot", help="save a picture of the points and their hull")
    parser.add_argument("--no-validate", dest="validate", action="store_false",
                        help="skip the finite-coordinates check")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.generate is not None:
            points = generate_points(args.generate, args.distribution, args.seed)
            source = f"generated_{args.distribution}_{args.generate}"
            logger.info("Generated %d points (%s)", len(points), args.distribution)
        else:
            points = read_points(args.input)
            source = os.path.basename(args.input)
            logger.info("Loaded %d points from %s", len(points), source)

        start_time = time.time()
        hull = ALGORITHMS[args.algorithm](points, validate=args.validate)
        execution_time = time.time() - start_time
        logger.info("Hull has %d vertices, computed in %.4f sec.", len(hull), execution_time)

        if args.output:
            if args.output.endswith('.csv'):
                save_results_csv(args.output, hull)
            else:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(generate_report(points, hull, source, args.algorithm, execution_time))
            logger.info("Results saved to %s", args.output)
        else:
            print(format_points("Convex hull", hull), end="")

        if args.plot:
            save_plot(points, hull, args.plot, title=f"{source}: {len(hull)} hull vertices")
            logger.info("Plot saved to %s", args.plot)

    except (OSError, PointFileError, InvalidPointError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
