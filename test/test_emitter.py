"""Tests for re-serialising parsed documents."""
import os

import pytest

from ansiblestyle.emitter import emit
from ansiblestyle.parser import parse

SAMPLES = (
    "key: value\n",
    "a : 1\nb:   'two'  # note\n\nc:\n  - \"three\"\n  -   four\n",
    "# header\n\n---\n\n- name: Play\n  hosts: 'all'\n  tasks:\n    - ansible.builtin.ping: {}\n",
    "script: |\n  echo one\n\n  echo two\nfolded: >-\n  a\n  b\n",
    "base: &base\n  a: 1\nref: *base\nsecret: !vault |\n  abc\n",
    "list: [1, 'two', {three: 3}]\nplain: first\n  second\n",
    "tasks:\n- a\n# between\n- b\n",
    "no_newline: true",
    "\ufeff# header\n\n---\n\n- ansible.builtin.ping:\n",
)


@pytest.mark.parametrize('text', SAMPLES)
def test_emit_reproduces_source(text):
    assert emit(parse(text)) == text


@pytest.mark.parametrize('text', SAMPLES)
def test_round_trip_is_structurally_equal(text):
    document = parse(text)
    assert parse(emit(document)) == document


@pytest.mark.parametrize('name', ('good.yml', 'example.yml'))
def test_examples_round_trip(examples_dir, name):
    with open(os.path.join(examples_dir, name), encoding='utf-8', newline='') as fh:
        text = fh.read()
    assert emit(parse(text)) == text
