"""Plane geometry: segment intersection and convex hulls (Jarvis march, Graham scan)."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key

from algobook.sorting import BenchmarkResult


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def direction(pi: Point, pj: Point, pk: Point) -> int:
    """Signed cross product telling on which side of pi-pj the point pk lies.

    Zero means the three points are collinear; the sign flips when pj and pk swap.
    """
    return (pk.x - pi.x) * (pj.y - pi.y) - (pj.x - pi.x) * (pk.y - pi.y)


def on_segment(pi: Point, pj: Point, pk: Point) -> bool:
    """True if pk lies strictly inside the bounding box of segment pi-pj."""
    return (
        min(pi.x, pj.x) < pk.x < max(pi.x, pj.x)
        and min(pi.y, pj.y) < pk.y < max(pi.y, pj.y)
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """True if segment p1-p2 intersects segment p3-p4."""
    d1 = direction(p3, p4, p1)
    d2 = direction(p3, p4, p2)
    d3 = direction(p1, p2, p3)
    d4 = direction(p1, p2, p4)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True
    return (
        (d1 == 0 and on_segment(p3, p4, p1))
        or (d2 == 0 and on_segment(p3, p4, p2))
        or (d3 == 0 and on_segment(p1, p2, p3))
        or (d4 == 0 and on_segment(p1, p2, p4))
    )


def check_angle(p0: Point, p1: Point, p2: Point) -> bool:
    """False if the path p0 -> p1 -> p2 turns left, True otherwise."""
    return direction(p0, p1, p2) >= 0


def polar_angle(origin: Point, point: Point) -> float:
    """Counter-clockwise angle in [0, 2*pi) from origin to point.

    Returns NaN when the two points coincide.
    """
    dx = point.x - origin.x
    dy = point.y - origin.y
    if dx == 0 and dy == 0:
        return math.nan
    angle = math.atan2(abs(dy), abs(dx))
    if dx >= 0 and dy >= 0:
        return angle
    if dx <= 0 and dy >= 0:
        return math.pi - angle
    if dx <= 0 and dy <= 0:
        return math.pi + angle
    return 2 * math.pi - angle


def _lowest_leftmost_index(points: list[Point]) -> int:
    if not points:
        raise ValueError("cannot build the convex hull of no points")
    return min(range(len(points)), key=lambda i: (points[i].y, points[i].x))


def jarvis_scan(points: Iterable[Point]) -> list[Point]:
    """Convex hull by Jarvis march.

    Starts from the lowest (then leftmost) point and walks counter-clockwise;
    the returned hull begins with the next vertex and ends with the start point.
    """
    pts = list(points)
    start_index = _lowest_leftmost_index(pts)
    pts[0], pts[start_index] = pts[start_index], pts[0]
    start = pts[0]

    hull: list[Point] = []
    seen: set[Point] = set()
    current = 0
    while True:
        origin = pts[current]
        best_index, best_point, best_angle = 0, origin, math.inf
        for i, candidate in enumerate(pts):
            if i == current or candidate in seen:
                continue
            angle = polar_angle(origin, candidate)
            if angle < best_angle:
                best_index, best_point, best_angle = i, candidate, angle
        hull.append(best_point)
        seen.add(best_point)
        if best_point == start:
            return hull
        current = best_index


def _squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """Convex hull by Graham scan, counter-clockwise from the lowest-leftmost point.

    Of several points at the same polar angle only the farthest is kept.
    Raises ValueError when the points do not span a proper hull.
    """
    pts = list(points)
    p0 = pts[_lowest_leftmost_index(pts)]
    others = [p for p in pts if p != p0]

    def by_angle(a: Point, b: Point) -> int:
        turn = direction(p0, a, b)
        if turn < 0:
            return -1
        if turn > 0:
            return 1
        return _squared_distance(p0, a) - _squared_distance(p0, b)

    others.sort(key=cmp_to_key(by_angle))

    filtered: list[Point] = []
    for p in others:
        if filtered and direction(p0, filtered[-1], p) == 0:
            filtered[-1] = p
        else:
            filtered.append(p)

    if len(filtered) < 2:
        raise ValueError("convex hull needs at least three non-collinear points")

    hull = [p0, filtered[0], filtered[1]]
    for p in filtered[2:]:
        while len(hull) > 1 and check_angle(hull[-2], hull[-1], p):
            hull.pop()
        hull.append(p)
    return hull


SQUARE = (Point(0, 10), Point(10, 10), Point(10, 0), Point(0, 0))


def _square_with_interior(rng: random.Random, count: int = 10) -> list[Point]:
    return [*SQUARE, *(Point(1 + rng.randrange(9), 1 + rng.randrange(9)) for _ in range(count))]


def run_benchmark(rng: random.Random | None = None) -> BenchmarkResult:
    """Time the geometry algorithms and check them on known configurations."""
    rng = rng or random.Random()
    report = BenchmarkResult("geometry")

    p1, p2, p3, p4, p5 = Point(0, 0), Point(2, 0), Point(1, 1), Point(1, -1), Point(2, 1)
    start = time.perf_counter()
    crossing = segments_intersect(p1, p2, p3, p4)
    apart = segments_intersect(p1, p2, p3, p5)
    report.timings["Segments intersection"] = time.perf_counter() - start

    graham_input = _square_with_interior(rng)
    start = time.perf_counter()
    graham = graham_scan(graham_input)
    report.timings["Graham Scan"] = time.perf_counter() - start

    jarvis_input = _square_with_interior(rng)
    start = time.perf_counter()
    jarvis = jarvis_scan(jarvis_input)
    report.timings["Jarvis Scan"] = time.perf_counter() - start

    report.correct = (
        crossing
        and not apart
        and len(graham) == len(SQUARE)
        and len(jarvis) == len(SQUARE)
    )
    return report