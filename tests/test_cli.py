"""Tests for command line parsing."""

import argparse

import pytest

from namewheel.__main__ import _parse_sequence


def test_parse_sequence():
    assert _parse_sequence("2,0, 3") == [2, 0, 3]
    assert _parse_sequence("") == []


def test_parse_sequence_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        _parse_sequence("2,x")
