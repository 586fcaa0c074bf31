"""Tests for the spacing rule."""
import pytest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.SpacingRule import SpacingRule
from ansiblestyle.testing import RunFromText

ADJACENT = """\
- name: One
  ansible.builtin.ping:
- name: Two
  ansible.builtin.ping:
"""

SEPARATED = """\
- name: One
  ansible.builtin.ping:

# Comments may sit between tasks
- name: Two
  ansible.builtin.ping:

- ansible.builtin.include_tasks: 'a.yml'
- ansible.builtin.include_tasks: 'b.yml'
"""

INDENTATION = """\
- name: Play
  hosts: 'all'
  tasks:
  - name: One
    ansible.builtin.debug:
       msg: 'x'
"""

DASH = """\
-   name: One
    ansible.builtin.ping:
"""

PLAYS = """\
- name: First
  hosts: 'all'
- name: Second
  hosts: 'all'
"""


@pytest.fixture
def runner():
    collection = RulesCollection()
    collection.register(SpacingRule())
    return RunFromText(collection)


def test_adjacent_tasks(runner):
    results = runner.run_text(ADJACENT)
    assert len(results) == 1
    assert results[0].position == "3:1"


def test_separated_tasks(runner):
    assert runner.run_text(SEPARATED) == []


def test_indentation(runner):
    results = runner.run_text(INDENTATION)
    assert [r.position for r in results] == ["4:3", "6:8"]
    assert results[0].message == "Content of 'tasks' should be indented to column 5, found column 3"


def test_space_after_dash(runner):
    results = runner.run_text(DASH)
    assert [r.message for r in results] == ["Expected exactly one space after '-'"]


def test_adjacent_plays(runner):
    results = runner.run_text(PLAYS)
    assert [r.position for r in results] == ["3:1"]
