import asyncio
import functools
import logging
import sys
import typing as t
from concurrent import futures
from os import path

import psutil

from quickhull import args, constants, convex_hull, data, graph, polygon, util

logger = logging.getLogger(__name__)

HullResult = t.Tuple[str, t.List[data.Point], t.Optional[t.List[int]]]


class Processor:
    """Runs one call per argument in a process pool, results in input order."""
    _executor_count: int
    _executor: futures.ProcessPoolExecutor
    _loop: asyncio.AbstractEventLoop

    def __init__(self, max_workers: t.Optional[int] = None):
        self._executor_count = max_workers or psutil.cpu_count() or 1
        self._executor = futures.ProcessPoolExecutor(
            max_workers=self._executor_count
        )
        self._loop = asyncio.new_event_loop()

    async def _gather(self, func: (), args_list: t.List[t.Any]):
        loop = asyncio.get_running_loop()
        return await asyncio.gather(*(
            loop.run_in_executor(self._executor, func, arg)
            for arg in args_list
        ))

    def process(
        self,
        func: (),
        args_list: t.List[t.Any],
        **kwargs: t.Dict[t.Any, t.Any],
    ) -> t.List[t.Any]:
        return list(self._loop.run_until_complete(
            self._gather(functools.partial(func, **kwargs), args_list)))

    def close(self):
        self._executor.shutdown()
        self._loop.close()

    def __enter__(self) -> 'Processor':
        return self

    def __exit__(self, *exc_info):
        self.close()


def verify_hull(
    name: str,
    points: t.Sequence[data.Point],
    hull_idxs: t.List[int],
) -> bool:
    uncovered = polygon.uncovered_points(points, hull_idxs)
    if uncovered:
        logger.warning("%s: %s points outside the hull: %s", name,
                       len(uncovered), uncovered)
        return False
    logger.info("%s: all %s points lie within the hull", name, len(points))
    return True


@util.timeit
def run_datafile(path_name: str, verify: bool = False) -> HullResult:
    try:
        points = data.load_datafile(path_name)
    except OSError as e:
        logger.error("%s: cannot read data file: %s", path_name, e)
        return path_name, [], None
    try:
        hull_idxs = convex_hull.convex_hull(points)
    except convex_hull.EmptyInputError as e:
        logger.error("%s: %s", path_name, e)
        return path_name, points, None
    logger.info("%s: %s hull points", path_name, len(hull_idxs))
    if verify:
        verify_hull(path_name, points, hull_idxs)
    return path_name, points, hull_idxs


def run_all(path_names: t.List[str], verify: bool = False) -> t.List[HullResult]:
    if len(path_names) == 1:
        return [run_datafile(path_names[0], verify=verify)]
    with Processor(max_workers=min(len(path_names),
                                   psutil.cpu_count() or 1)) as proc:
        return proc.process(run_datafile, path_names, verify=verify)


def figure_name(file_name: str, number: int, count: int) -> str:
    if count == 1:
        return file_name
    root, ext = path.splitext(file_name)
    return f'{root}-{number}{ext}'


def main(argv=None) -> int:
    startup_args = args.parse_args(argv)
    util.setup_logging(startup_args.log_level, constants.LOG_FORMAT)
    path_names = startup_args.datafile
    logger.info('Loading %s', ', '.join(path_names))
    exit_code = 0
    results = run_all(path_names, verify=startup_args.verify)
    for number, (path_name, points, hull_idxs) in enumerate(results):
        if len(path_names) > 1:
            print(f'# {path_name}')
        if hull_idxs is None:
            exit_code = 1
            continue
        for line in data.format_points(data.hull_points(points, hull_idxs)):
            print(line)
        if startup_args.plot or startup_args.save:
            p = graph.plot_hull(path.basename(path_name), points, hull_idxs)
            if startup_args.save:
                p.save(figure_name(startup_args.save, number,
                                   len(path_names)))
            if not startup_args.plot:
                p.close()
    if startup_args.plot:
        graph.HullPlot.show()
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
