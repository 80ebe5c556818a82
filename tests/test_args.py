"""Tests for command line parsing."""

import pytest

from quickhull import args, constants

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch):
    monkeypatch.delenv(constants.LOG_LEVEL_ENV, raising=False)
    parsed = args.parse_args([])
    assert parsed.datafile == [args.DEFAULT_DATA_FILE]
    assert parsed.log_level == constants.DEFAULT_LOG_LEVEL
    assert not parsed.verify
    assert not parsed.plot
    assert parsed.save is None


def test_multiple_datafiles():
    parsed = args.parse_args(["--datafile", "a.dat", "b.dat", "--verify"])
    assert parsed.datafile == ["a.dat", "b.dat"]
    assert parsed.verify


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(constants.LOG_LEVEL_ENV, "DEBUG")
    assert args.parse_args([]).log_level == "DEBUG"


def test_unknown_arguments_are_ignored():
    parsed = args.parse_args(["--bogus", "--save", "out.png"])
    assert parsed.save == "out.png"
