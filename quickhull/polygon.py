import typing as t

import numpy as np
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon
from shapely.geometry.base import BaseGeometry

from quickhull import convex_hull, data


def hull_polygon(
    points: t.Union[np.ndarray, t.Sequence[data.PointLike]],
    hull_idxs: t.Iterable[int],
) -> BaseGeometry:
    points = data.as_array(points)
    ordered = convex_hull.ordered_hull(points, hull_idxs)
    coords = [tuple(points[i]) for i in ordered]
    if len(coords) == 1:
        return ShapelyPoint(coords[0])
    if len(coords) == 2:
        return LineString(coords)
    return Polygon(coords)


def uncovered_points(
    points: t.Union[np.ndarray, t.Sequence[data.PointLike]],
    hull_idxs: t.Iterable[int],
) -> t.List[int]:
    """Indices of input points lying outside the hull geometry."""
    points = data.as_array(points)
    geometry = hull_polygon(points, hull_idxs)
    return [idx for idx, (x, y) in enumerate(points)
            if not geometry.covers(ShapelyPoint(x, y))]


def is_convex(
    points: t.Union[np.ndarray, t.Sequence[data.PointLike]],
    ordered_idxs: t.Sequence[int],
) -> bool:
    # counter-clockwise order: every turn must be a left turn or straight
    points = data.as_array(points)
    if len(ordered_idxs) < 3:
        return True
    vertices = points[list(ordered_idxs)]
    edges = np.roll(vertices, -1, axis=0) - vertices
    next_edges = np.roll(edges, -1, axis=0)
    turns = edges[:, 0] * next_edges[:, 1] - edges[:, 1] * next_edges[:, 0]
    return bool(np.all(turns >= 0.0))
