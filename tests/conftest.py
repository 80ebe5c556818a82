"""Shared fixtures for the quickhull tests."""

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture
def square():
    return [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]


@pytest.fixture
def scattered():
    rng = np.random.default_rng(20240611)
    return rng.uniform(-100.0, 100.0, size=(300, 2))


@pytest.fixture
def write_datafile(tmp_path):
    def _write(name, text):
        file_path = tmp_path / name
        file_path.write_text(text)
        return str(file_path)
    return _write
