# pylint: disable=missing-function-docstring
import unittest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.DeprecatedOptionsRule import DeprecatedOptionsRule
from ansiblestyle.testing import RunFromText

PLAYBOOK = """\
- hosts: 'all'
  sudo: true
  tasks:
    - name: Loop
      ansible.builtin.debug:
        msg: '{{ item }}'
      with_items: '{{ things }}'

    - include: 'other.yml'
"""

PLAYBOOK_INCLUDE = """\
- hosts: 'all'
  tasks: []

- include: 'site.yml'
"""

TASK_FILE_INCLUDE = """\
- include: 'a.yml'

- name: Start
  ansible.builtin.service:
    name: 'foo'
"""

CURRENT = """\
- hosts: 'all'
  become: true
  tasks:
    - name: Loop
      ansible.builtin.debug:
        msg: '{{ item }}'
      loop: '{{ things }}'
"""


class TestDeprecatedOptionsRule(unittest.TestCase):
    def setUp(self):
        self.collection = RulesCollection()
        self.collection.register(DeprecatedOptionsRule())
        self.runner = RunFromText(self.collection)

    def test_deprecated(self):
        results = self.runner.run_text(PLAYBOOK)
        self.assertEqual([2, 7, 9], [r.linenumber for r in results])
        self.assertEqual("'sudo' is deprecated, use become instead", results[0].message)
        self.assertIn("use loop instead", results[1].message)
        self.assertIn("include_tasks or import_tasks", results[2].message)

    def test_playbook_include(self):
        results = self.runner.run_text(PLAYBOOK_INCLUDE)
        self.assertEqual(1, len(results))
        self.assertIn("import_playbook", results[0].message)

    def test_current_options(self):
        self.assertEqual([], self.runner.run_text(CURRENT))

    def test_task_file_include(self):
        results = self.runner.run_text(TASK_FILE_INCLUDE)
        self.assertEqual(1, len(results))
        self.assertEqual("1:3", results[0].position)
        self.assertIn("include_tasks or import_tasks", results[0].message)
