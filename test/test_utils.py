"""Tests for play and task classification."""
import pytest

from ansiblestyle.parser import parse
from ansiblestyle.utils import (
    Kind,
    classify,
    is_playbook,
    is_task_file,
    iter_adjacent,
    iter_plays,
    iter_scalars,
    iter_task_lists,
    iter_tasks,
    make_task,
)

PLAYBOOK = """\
- name: Play
  hosts: 'all'
  pre_tasks:
    - ansible.builtin.ping:
  tasks:
    - name: Guarded
      block:
        - ansible.builtin.debug:
            msg: 'inner'
      rescue:
        - ansible.builtin.fail:

    - ansible.builtin.include_tasks: 'more.yml'

- ansible.builtin.import_playbook: 'other.yml'
"""


def _mapping(text):
    return parse(text).root


@pytest.mark.parametrize(('text', 'context', 'kind'), (
    ("hosts: 'all'\n", "play", Kind.PLAY),
    ("import_playbook: 'a.yml'\n", "play", Kind.INCLUDE),
    ("ansible.builtin.import_playbook: 'a.yml'\n", "play", Kind.INCLUDE),
    ("name: 'x'\n", "play", Kind.UNKNOWN),
    ("block: []\n", "task", Kind.BLOCK),
    ("include_tasks: 'a.yml'\n", "task", Kind.INCLUDE),
    ("ansible.builtin.import_role:\n  name: 'web'\n", "task", Kind.INCLUDE),
    ("name: 'x'\nansible.builtin.ping:\nwhen: y\n", "task", Kind.TASK),
    ("local_action: 'ping'\n", "task", Kind.TASK),
    ("copy: {}\nfile: {}\n", "task", Kind.UNKNOWN),
    ("name: 'only a name'\n", "task", Kind.UNKNOWN),
))
def test_classify(text, context, kind):
    assert classify(_mapping(text), context) is kind


def test_make_task_groups_entries():
    task = make_task(_mapping(
        "name: 'x'\ntags: []\nansible.builtin.apt: {}\nargs: {}\n"
        "with_items: []\nloop_control: {}\nbecome: true\nwhen: y\n"))
    assert task.kind is Kind.TASK
    assert task.name.key.value == 'name'
    assert task.tags.key.value == 'tags'
    assert task.action == 'ansible.builtin.apt'
    assert task.module_name == 'apt'
    assert task.args.key.value == 'args'
    assert [e.key.value for e in task.loops] == ['with_items', 'loop_control']
    assert [e.key.value for e in task.options] == ['become', 'when']


def test_playbook_walkers():
    document = parse(PLAYBOOK)
    assert is_playbook(document)
    assert not is_task_file(document)
    assert [play.kind for play in iter_plays(document)] == [Kind.PLAY, Kind.INCLUDE]
    owners = [owner.key.value for owner, _ in iter_task_lists(document)]
    assert owners == ['pre_tasks', 'tasks', 'block', 'rescue']
    tasks = list(iter_tasks(document))
    assert [task.line for task in tasks] == [4, 6, 8, 11, 13]
    assert [task.kind for task in tasks] == [
        Kind.TASK, Kind.BLOCK, Kind.TASK, Kind.TASK, Kind.INCLUDE]


def test_iter_adjacent():
    pairs = [
        (first.node.line, first_kind, second.node.line, second_kind)
        for first, first_kind, second, second_kind in iter_adjacent(parse(PLAYBOOK))]
    assert pairs == [
        (1, Kind.PLAY, 15, Kind.INCLUDE),
        (6, Kind.BLOCK, 13, Kind.INCLUDE),
    ]


def test_task_file():
    document = parse("- ansible.builtin.ping:\n")
    assert is_task_file(document)
    assert not is_playbook(document)
    assert [t.kind for t in iter_tasks(document)] == [Kind.TASK]
    assert not is_task_file(parse("key: 'value'\n"))


def test_iter_scalars():
    document = parse("a: 1\nb:\n  - 'x'\n  - c: y\n")
    found = [(key, scalar.value) for key, scalar in iter_scalars(document.root)]
    assert found == [('a', '1'), ('b', 'x'), ('c', 'y')]


def test_task_file_with_bare_include():
    document = parse(
        "- include: 'a.yml'\n"
        "- name: Start\n"
        "  service: name=foo state=started\n")
    assert is_task_file(document)
    assert not is_playbook(document)
    assert list(iter_plays(document)) == []
    assert [t.kind for t in iter_tasks(document)] == [Kind.INCLUDE, Kind.TASK]


def test_bare_include_in_playbook_is_a_play():
    document = parse("- hosts: 'all'\n  tasks: []\n\n- include: 'site.yml'\n")
    assert [play.kind for play in iter_plays(document)] == [Kind.PLAY, Kind.INCLUDE]


def test_every_document_is_walked():
    document = parse(
        "---\n"
        "- hosts: 'all'\n"
        "  tasks:\n"
        "    - ansible.builtin.ping:\n"
        "---\n"
        "- name: Second\n"
        "  ansible.builtin.debug:\n")
    assert is_playbook(document)
    assert is_task_file(document)
    assert [play.line for play in iter_plays(document)] == [2]
    assert [task.line for task in iter_tasks(document)] == [4, 6]
