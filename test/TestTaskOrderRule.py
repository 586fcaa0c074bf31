"""Tests for the task-order rule."""
import pytest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.TaskOrderRule import TaskOrderRule
from ansiblestyle.testing import RunFromText

ORDERED = """\
- name: Install
  tags: ['web']
  ansible.builtin.apt:
    name: 'nginx'
    state: 'present'
  args:
    chdir: '/tmp'
  loop: '{{ packages }}'
  loop_control:
    loop_var: package
  become: true
  when: install_web

- name: Guarded
  block:
    - ansible.builtin.ping:
  rescue:
    - ansible.builtin.ping:
  always:
    - ansible.builtin.ping:
  when: guarded
"""

UNORDERED = """\
- ansible.builtin.apt:
    state: 'present'
    name: 'nginx'
  name: Install
  when: install_web
  become: true
  loop: '{{ packages }}'
"""

BLOCK = """\
- always:
    - ansible.builtin.debug:
  block:
    - ansible.builtin.ping:
"""


@pytest.fixture
def runner():
    collection = RulesCollection()
    collection.register(TaskOrderRule())
    return RunFromText(collection)


def test_ordered(runner):
    assert runner.run_text(ORDERED) == []


def test_unordered(runner):
    results = runner.run_text(UNORDERED)
    assert [(r.linenumber, r.message) for r in results] == [
        (3, "'name' should come before 'state'"),
        (4, "'name' should come before 'ansible.builtin.apt'"),
        (6, "'become' should come before 'when'"),
        (7, "'loop' should come before 'when'"),
    ]


def test_block_sections(runner):
    results = runner.run_text(BLOCK)
    assert len(results) == 1
    assert results[0].message == "'block' should come before 'always'"
