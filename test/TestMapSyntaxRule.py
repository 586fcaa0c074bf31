# pylint: disable=missing-function-docstring
import unittest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.MapSyntaxRule import MapSyntaxRule
from ansiblestyle.testing import RunFromText

TASKS = """\
- name: Copy
  ansible.builtin.copy: src=a dest=b

- name: Run
  ansible.builtin.shell: echo a=b

- name: Local
  local_action: copy src=a dest=b

- name: Local command
  local_action: command touch a=b

- name: Good
  ansible.builtin.copy:
    src: 'a'
"""


class TestMapSyntaxRule(unittest.TestCase):
    def setUp(self):
        self.collection = RulesCollection()
        self.collection.register(MapSyntaxRule())
        self.runner = RunFromText(self.collection)

    def test_key_value_arguments(self):
        results = self.runner.run_text(TASKS)
        self.assertEqual(["2:25", "8:17"], [r.position for r in results])
        self.assertIn("'ansible.builtin.copy'", results[0].message)
