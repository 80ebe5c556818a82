import functools
import logging
import time
from os import path

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", fmt: str = None):
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        if fmt:
            handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)


def get_relative_path(module: str, path_name: str) -> str:
    return path.abspath(path.join(path.dirname(module), path_name))


def timeit(method):
    @functools.wraps(method)
    def timed(*args, **kw):
        ts = time.time()
        result = method(*args, **kw)
        te = time.time()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed


class Numbers:
    current: int

    def __init__(self):
        self.current = 0

    def __iter__(self) -> 'Numbers':
        return self

    def __next__(self) -> int:
        self.current += 1
        return self.current

    def next(self) -> int:
        return next(self)
