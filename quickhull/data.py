import logging
import math
import typing as t

import numpy as np
from dataclasses import dataclass

from quickhull import constants, util

logger = logging.getLogger(__name__)

Coords = t.Tuple[float, float]
NPCoords = t.List[float]
PointLike = t.Union['Point', Coords, t.Sequence[float]]


def format_coord(value: float) -> str:
    # shortest round-trip digits, never in exponent notation
    return np.format_float_positional(value, trim='-')


def parse_coord(token: str) -> float:
    if '_' in token:
        raise ValueError(f'not a number: {token!r}')
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f'coordinate is not finite: {token!r}')
    return value


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def array(self) -> NPCoords:
        return [self.x, self.y]

    def __str__(self) -> str:
        return f'{format_coord(self.x)},{format_coord(self.y)}'


def create_point(x: float, y: float) -> Point:
    return Point(float(x), float(y))


def parse_line(line: str) -> Point:
    """
    Parse one ``x y`` line. Tokens are separated by any run of whitespace.
    Raises ValueError when the field count is wrong or a token is not a
    finite number.
    """
    fields = line.split()
    if len(fields) != constants.FIELD_COUNT:
        raise ValueError(f'expected {constants.FIELD_COUNT} fields, '
                         f'got {len(fields)}: {fields!r}')
    x, y = fields
    return create_point(parse_coord(x), parse_coord(y))


def read_points(fh: t.TextIO) -> t.List[Point]:
    points = []
    for line_number, read_line in enumerate(fh, start=1):
        try:
            points.append(parse_line(read_line))
        except ValueError as e:
            logger.warning("Not valid input on line %s: %s", line_number, e)
    return points


@util.timeit
def load_datafile(path_name: str) -> t.List[Point]:
    with open(path_name) as fh:
        points = read_points(fh)
    logger.info("Loaded %s points from %s", len(points), path_name)
    return points


def as_array(points: t.Union[np.ndarray, t.Sequence[PointLike]]) -> np.ndarray:
    if isinstance(points, np.ndarray):
        array = points.astype(np.float64, copy=False)
    else:
        array = np.array([p.array() if isinstance(p, Point) else list(p)
                          for p in points], dtype=np.float64)
    if array.size == 0:
        return array.reshape(0, 2)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f'expected an (N, 2) point array, '
                         f'got shape {array.shape}')
    return array


def hull_points(
    points: t.Sequence[Point],
    hull_idxs: t.Iterable[int],
) -> t.List[Point]:
    return [points[idx] for idx in hull_idxs]


def format_points(points: t.Iterable[Point]) -> t.List[str]:
    return [str(p) for p in points]
