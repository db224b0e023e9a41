"""Geometry helpers shared by movement, placement and target motion.

All distance comparisons in the game use squared distances against
squared thresholds; nothing here takes a square root.
"""

from models import Point2D


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound value to [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def squared_distance(a: Point2D, b: Point2D) -> float:
    """Squared Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def circles_intersect(
    c1: Point2D,
    r1: float,
    c2: Point2D,
    r2: float,
) -> bool:
    """Check whether two circles overlap. Touching counts as overlapping.

    Args:
        c1: Center of first circle
        r1: Radius of first circle
        c2: Center of second circle
        r2: Radius of second circle

    Returns:
        True if squared center distance <= (r1 + r2)^2
    """
    reach = r1 + r2
    return squared_distance(c1, c2) <= reach * reach


def circle_overlaps_square(
    center: Point2D,
    radius: float,
    square_center: Point2D,
    half_width: float,
) -> bool:
    """Check a circle against an axis-aligned square.

    The nearest point of the square to the circle center is found by
    clamping; the circle overlaps if that point is strictly closer than
    the radius. Grazing contact does not count.

    Args:
        center: Circle center
        radius: Circle radius
        square_center: Square center
        half_width: Half the square's side length

    Returns:
        True if the circle penetrates the square
    """
    nearest = Point2D(
        x=clamp(center.x, square_center.x - half_width, square_center.x + half_width),
        y=clamp(center.y, square_center.y - half_width, square_center.y + half_width),
    )
    return squared_distance(center, nearest) < radius * radius


def cubic_bezier(
    t: float,
    p0: Point2D,
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
) -> Point2D:
    """Evaluate a cubic Bezier curve at parameter t.

    Bernstein form:
        B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3

    t is not clamped here; callers keep it in [0, 1].

    Examples:
        >>> p = cubic_bezier(0.0, Point2D(x=0, y=0), Point2D(x=1, y=1),
        ...                  Point2D(x=2, y=1), Point2D(x=3, y=0))
        >>> p.as_tuple
        (0.0, 0.0)
    """
    u = 1.0 - t
    uu = u * u
    tt = t * t

    w0 = uu * u
    w1 = 3.0 * uu * t
    w2 = 3.0 * u * tt
    w3 = tt * t

    return Point2D(
        x=w0 * p0.x + w1 * p1.x + w2 * p2.x + w3 * p3.x,
        y=w0 * p0.y + w1 * p1.y + w2 * p2.y + w3 * p3.y,
    )
