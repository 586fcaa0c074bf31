"""Tests for the trailing-newline rule."""
import pytest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.TrailingNewlineRule import TrailingNewlineRule
from ansiblestyle.testing import RunFromText


@pytest.fixture
def runner():
    collection = RulesCollection()
    collection.register(TrailingNewlineRule())
    return RunFromText(collection)


def test_single_newline(runner):
    assert runner.run_text("key: 'value'\n") == []


def test_missing_newline(runner):
    results = runner.run_text("key: 1")
    assert len(results) == 1
    assert results[0].position == "1:7"
    assert results[0].message == "No newline at end of file"


def test_many_newlines(runner):
    results = runner.run_text("key: 1\n\n\n")
    assert len(results) == 1
    assert results[0].linenumber == 2
    assert results[0].message == "Too many blank lines at end of file"


def test_from_file(runner):
    """Newlines survive the round trip through a file on disk."""
    assert runner.run_playbook("key: 1\n") == []
    assert len(runner.run_playbook("key: 1\n\n")) == 1
