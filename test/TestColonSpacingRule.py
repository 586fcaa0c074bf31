# pylint: disable=missing-function-docstring
import unittest

from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.ColonSpacingRule import ColonSpacingRule
from ansiblestyle.testing import RunFromText

SPACING = """\
a : 1
b:  2
c: 3
d:
  e: 4
f: {g: 5}
"""


class TestColonSpacingRule(unittest.TestCase):
    def setUp(self):
        self.collection = RulesCollection()
        self.collection.register(ColonSpacingRule())
        self.runner = RunFromText(self.collection)

    def test_spacing(self):
        results = self.runner.run_text(SPACING)
        self.assertEqual(["1:3", "2:2"], [r.position for r in results])
        self.assertIn("before ':'", results[0].message)
        self.assertIn("2 spaces after ':'", results[1].message)

    def test_good_spacing(self):
        results = self.runner.run_text("a: 1\nb:\n  - c: 2\n")
        self.assertEqual([], results)
