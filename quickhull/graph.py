import typing as t

import matplotlib.pyplot as plt
import numpy as np

from quickhull import convex_hull, data, util


class HullPlot:
    numbers = util.Numbers()
    title: t.Any

    def __init__(self, title=""):
        self.title = title
        self.fig = plt.figure(self.title or self.numbers.next())
        if self.title:
            plt.title(self.title)
        plt.gca().set_aspect('equal', adjustable='datalim')

    def draw_points(
        self,
        points: np.ndarray,
        color: str = 'blue',
        markersize: float = 2.0,
        zorder: float = 1,
    ):
        if not len(points):
            return
        x, y = np.asarray(points).T
        plt.figure(self.fig.number)
        plt.plot(x, y, 'o', markersize=markersize, color=color, zorder=zorder)

    def draw_hull(
        self,
        points: np.ndarray,
        hull_idxs: t.List[int],
        colors: str = 'red',
        linewidths: float = 1.0,
        zorder: float = 2,
    ):
        ordered = convex_hull.ordered_hull(points, hull_idxs)
        if not ordered:
            return
        outline = np.asarray(points)[ordered + ordered[:1]]
        x, y = outline.T
        plt.figure(self.fig.number)
        plt.plot(x, y, '-', color=colors, linewidth=linewidths, zorder=zorder)
        plt.plot(x, y, 'o', color=colors, markersize=4.0, zorder=zorder)

    def save(self, file_name="hull.png", file_format=None):
        plt.figure(self.fig.number)
        self.fig.savefig(file_name, format=file_format)

    def close(self):
        plt.close(self.fig)

    @classmethod
    def show(cls):
        plt.show()


def plot_hull(
    name: str,
    points: t.Sequence[data.PointLike],
    hull_idxs: t.List[int],
) -> HullPlot:
    array = data.as_array(points)
    p = HullPlot(f'{name} hull')
    p.draw_points(array)
    p.draw_hull(array, hull_idxs)
    return p
