# pylint: disable=missing-function-docstring
import unittest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.FileHeaderRule import FileHeaderRule
from ansiblestyle.testing import RunFromText

SUCCESS = """\
# Ping every host.

---

- hosts: 'all'
"""

MISSING_HEADER = """\
---
- hosts: 'all'
"""

MISSING_BLANK_AFTER_COMMENT = """\
# Ping every host.
---

- hosts: 'all'
"""

MISSING_MARKER = """\
# Ping every host.

- hosts: 'all'
"""

MISSING_BLANK_AFTER_MARKER = """\
# Ping every host.

---
- hosts: 'all'
"""


class TestFileHeaderRule(unittest.TestCase):
    def setUp(self):
        self.collection = RulesCollection()
        self.collection.register(FileHeaderRule())
        self.runner = RunFromText(self.collection)

    def test_success(self):
        results = self.runner.run_text(SUCCESS)
        self.assertEqual(0, len(results))

    def test_missing_header(self):
        results = self.runner.run_text(MISSING_HEADER)
        self.assertEqual(1, len(results))
        self.assertEqual(1, results[0].linenumber)
        self.assertEqual("File should start with a comment block", results[0].message)

    def test_missing_blank_after_comment(self):
        results = self.runner.run_text(MISSING_BLANK_AFTER_COMMENT)
        self.assertEqual(1, len(results))
        self.assertEqual(2, results[0].linenumber)

    def test_missing_marker(self):
        results = self.runner.run_text(MISSING_MARKER)
        self.assertEqual(1, len(results))
        self.assertEqual(3, results[0].linenumber)
        self.assertIn("'---'", results[0].message)

    def test_missing_blank_after_marker(self):
        results = self.runner.run_text(MISSING_BLANK_AFTER_MARKER)
        self.assertEqual(1, len(results))
        self.assertEqual(4, results[0].linenumber)

    def test_empty_file(self):
        self.assertEqual([], self.runner.run_text(""))
