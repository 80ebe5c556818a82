"""Tests for point parsing, loading and rendering."""

import io
import logging

import numpy as np
import pytest

from quickhull import data

pytestmark = pytest.mark.unit


class TestPoint:
    def test_str_drops_integral_fraction(self):
        assert str(data.Point(1.0, -2.0)) == "1,-2"

    def test_str_keeps_fraction(self):
        assert str(data.Point(0.5, -1.25)) == "0.5,-1.25"

    def test_str_never_uses_exponent(self):
        assert str(data.Point(1.5e-05, -0.0)) == "0.000015,-0"
        assert str(data.Point(1e20, 2.0)) == "100000000000000000000,2"

    def test_coords_and_array(self):
        p = data.create_point(3, 4)
        assert p.coords == (3.0, 4.0)
        assert p.array() == [3.0, 4.0]

    def test_frozen(self):
        p = data.Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0


class TestParseLine:
    def test_single_space(self):
        assert data.parse_line("1.5 2\n") == data.Point(1.5, 2.0)

    def test_repeated_whitespace(self):
        assert data.parse_line("  -3   4.25\t\n") == data.Point(-3.0, 4.25)

    @pytest.mark.parametrize("line", ["", "1", "1 2 3", "a b", "1 two",
                                      "nan 0", "0 inf", "-inf 1", "1_0 2"])
    def test_invalid_lines_raise(self, line):
        with pytest.raises(ValueError):
            data.parse_line(line)


class TestReadPoints:
    def test_skips_malformed_lines_with_warning(self, caplog):
        fh = io.StringIO("0 0\n1 2 3\n\nx y\n4 0\n")
        with caplog.at_level(logging.WARNING, logger="quickhull.data"):
            points = data.read_points(fh)
        assert points == [data.Point(0.0, 0.0), data.Point(4.0, 0.0)]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 3
        assert "line 2" in warnings[0].getMessage()

    def test_skips_non_finite_coordinates(self, caplog):
        fh = io.StringIO("0 0\nnan 0\n5 0\n2 3\n")
        with caplog.at_level(logging.WARNING, logger="quickhull.data"):
            points = data.read_points(fh)
        assert [p.coords for p in points] == [(0, 0), (5, 0), (2, 3)]
        assert "line 2" in caplog.text

    def test_load_datafile(self, write_datafile):
        path_name = write_datafile("points.dat", "0 0\n4 0\n4 4\n")
        points = data.load_datafile(path_name)
        assert [p.coords for p in points] == [(0, 0), (4, 0), (4, 4)]

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            data.load_datafile(str(tmp_path / "missing.dat"))


class TestAsArray:
    def test_from_points(self):
        result = data.as_array([data.Point(1.0, 2.0), data.Point(3.0, 4.0)])
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_from_pairs(self):
        result = data.as_array([(1, 2), (3, 4)])
        assert result.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_empty(self):
        assert data.as_array([]).shape == (0, 2)

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            data.as_array(np.zeros((3, 3)))


def test_hull_points_render_in_order():
    points = [data.Point(0.0, 0.0), data.Point(4.0, 0.0), data.Point(2.5, 3.0)]
    rendered = data.format_points(data.hull_points(points, [2, 0]))
    assert rendered == ["2.5,3", "0,0"]
