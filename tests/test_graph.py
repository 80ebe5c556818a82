"""Tests for hull rendering."""

import pytest

from quickhull import graph

pytestmark = pytest.mark.unit


def test_plot_hull_saves_figure(tmp_path, square):
    p = graph.plot_hull("square", square, [0, 1, 2, 3])
    target = tmp_path / "square.png"
    p.save(str(target))
    p.close()
    assert target.exists()
    assert target.stat().st_size > 0


def test_plot_single_point(tmp_path):
    p = graph.plot_hull("dot", [(5, 5)], [0, 0])
    target = tmp_path / "dot.png"
    p.save(str(target))
    p.close()
    assert target.exists()
