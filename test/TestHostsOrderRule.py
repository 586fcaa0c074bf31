"""Tests for the hosts-order rule."""
import pytest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.HostsOrderRule import HostsOrderRule
from ansiblestyle.testing import RunFromText

ORDERED = """\
- name: Play
  hosts: 'all'
  become: true
  vars: {}
  pre_tasks: []
  roles: []
  tasks: []
  post_tasks: []
  handlers: []
"""

UNORDERED = """\
- tasks:
    - ansible.builtin.ping:
  hosts: 'all'
  become: true
  name: Play
"""

OPTIONS = """\
- hosts: 'all'
  name: Play
  gather_facts: false
  become: true
  handlers: []
  tasks: []
"""


@pytest.fixture
def runner():
    collection = RulesCollection()
    collection.register(HostsOrderRule())
    return RunFromText(collection)


def test_ordered(runner):
    assert runner.run_text(ORDERED) == []


def test_sections_before_declaration(runner):
    results = runner.run_text(UNORDERED)
    assert [r.linenumber for r in results] == [3, 4, 5]
    assert results[0].message == "'hosts' should come before 'tasks'"


def test_options_and_sections(runner):
    results = runner.run_text(OPTIONS)
    assert [r.message for r in results] == [
        "'become' should come before 'gather_facts'",
        "'tasks' should come before 'handlers'",
    ]
