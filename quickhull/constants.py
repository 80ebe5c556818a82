from enum import Enum

DATA_FILE = "../data/points.dat"

FIELD_COUNT = 2
LOG_LEVEL_ENV = "QUICKHULL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Extreme(int, Enum):
    LEFTMOST = 0
    RIGHTMOST = 1
