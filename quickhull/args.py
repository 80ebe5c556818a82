import argparse
import os

from quickhull import constants, util

DEFAULT_DATA_FILE = util.get_relative_path(__file__, constants.DATA_FILE)


def parse_args(argv=None):
    parser = argparse.ArgumentParser("QuickHull 2-D convex hull")
    parser.add_argument("--datafile", type=str, nargs="+",
                        default=[DEFAULT_DATA_FILE])
    parser.add_argument("--verify", action="store_true",
                        help="check that every point lies inside the hull")
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--save", type=str, default=None,
                        help="write the hull figure to this file")
    parser.add_argument("--log-level", type=str,
                        default=os.environ.get(constants.LOG_LEVEL_ENV,
                                               constants.DEFAULT_LOG_LEVEL))
    parsed, _ = parser.parse_known_args(argv)
    return parsed
