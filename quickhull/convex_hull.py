import logging
import typing as t

import numpy as np

from quickhull import constants, data

logger = logging.getLogger(__name__)

HullIndexes = t.List[int]


class EmptyInputError(ValueError):
    """Raised when a hull is requested for an empty point set."""


def find_extreme(points: np.ndarray, direction: constants.Extreme) -> int:
    """
    Index of the leftmost (minimum x) or rightmost (maximum x) point.
    On ties the first occurrence wins.
    """
    points = data.as_array(points)
    if not len(points):
        raise EmptyInputError("no points to search for an extreme")
    xs = points[:, 0]
    # NaN never wins a strict comparison, so it can only stay at index 0
    xs = np.where(np.isnan(xs), xs[0], xs)
    if direction == constants.Extreme.LEFTMOST:
        return int(np.argmin(xs))
    return int(np.argmax(xs))


def distance(
    points: np.ndarray,
    targets: np.ndarray,
    first: int,
    second: int,
) -> np.ndarray:
    # cross product of (target - first) and (second - first), positive on
    # the left of first -> second
    segment = points[second] - points[first]
    vec_target = points[targets] - points[first]
    return vec_target[..., 1] * segment[0] - vec_target[..., 0] * segment[1]


def outside_set(
    points: np.ndarray,
    candidates: np.ndarray,
    first: int,
    second: int,
) -> t.Tuple[np.ndarray, t.Optional[int]]:
    """
    Split ``candidates`` against the directed segment first -> second.

    Returns the candidates lying strictly on the left of the segment, in
    their original order, and the one farthest from it (the first found
    when several share the maximum), or None when nothing is outside.
    Points exactly on the line are dropped.
    """
    candidates = np.asarray(candidates, dtype=np.intp)
    distances = distance(points, candidates, first, second)
    outside = distances > 0.0
    result = candidates[outside]
    if not len(result):
        return result, None
    return result, int(result[np.argmax(distances[outside])])


def _sub_quickhull(
    points: np.ndarray,
    candidates: np.ndarray,
    hull_idxs: HullIndexes,
    first: int,
    second: int,
):
    next_candidates, farthest = outside_set(points, candidates, first, second)
    if farthest is None:
        return
    hull_idxs.append(farthest)
    _sub_quickhull(points, next_candidates, hull_idxs, first, farthest)
    _sub_quickhull(points, next_candidates, hull_idxs, farthest, second)


def convex_hull(
    points: t.Union[np.ndarray, t.Sequence[data.PointLike]],
    hull_idxs: t.Optional[HullIndexes] = None,
) -> HullIndexes:
    """
    Compute the convex hull of ``points`` with QuickHull.

    Returns the indices of the hull vertices in order of discovery: the
    leftmost and rightmost points first, then the chain above the segment
    joining them, then the chain below it. When ``hull_idxs`` is given the
    indices are appended to it and the same list is returned.
    """
    points = data.as_array(points)
    if not len(points):
        raise EmptyInputError("cannot compute the convex hull of an empty "
                              "point set")
    if hull_idxs is None:
        hull_idxs = []

    p_min = find_extreme(points, constants.Extreme.LEFTMOST)
    p_max = find_extreme(points, constants.Extreme.RIGHTMOST)
    indices = np.arange(len(points), dtype=np.intp)

    start = len(hull_idxs)
    hull_idxs.append(p_min)
    hull_idxs.append(p_max)
    _sub_quickhull(points, indices, hull_idxs, p_min, p_max)
    _sub_quickhull(points, indices, hull_idxs, p_max, p_min)
    logger.debug("Found %s hull points out of %s", len(hull_idxs) - start,
                 len(points))
    return hull_idxs


def ordered_hull(
    points: t.Union[np.ndarray, t.Sequence[data.PointLike]],
    hull_idxs: t.Iterable[int],
) -> HullIndexes:
    """
    Distinct hull indices sorted counter-clockwise around their centroid,
    rotated to start at the first discovered index.
    """
    points = data.as_array(points)
    unique = list(dict.fromkeys(int(i) for i in hull_idxs))
    if len(unique) < 3:
        return unique
    vertices = points[unique]
    center = vertices.mean(axis=0)
    angles = np.arctan2(vertices[:, 1] - center[1], vertices[:, 0] - center[0])
    order = [unique[i] for i in np.argsort(angles, kind='stable')]
    start = order.index(unique[0])
    return order[start:] + order[:start]
