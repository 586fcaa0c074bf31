"""Tests for the boolean-literal rule."""
import pytest

from ansiblestyle.config import LintConfig
from ansiblestyle.rules import RulesCollection
from ansiblestyle.rules.BooleanLiteralRule import BooleanLiteralRule
from ansiblestyle.testing import RunFromText


@pytest.fixture
def runner():
    collection = RulesCollection()
    collection.register(BooleanLiteralRule())
    return RunFromText(collection)


def test_number_on_boolean_key(runner):
    results = runner.run_text("enabled: 1\n")
    assert len(results) == 1
    assert results[0].rule_id == 'boolean-literal'
    assert results[0].position == "1:1"
    assert results[0].message == "Use 'true' instead of '1' for 'enabled'"


@pytest.mark.parametrize(('text', 'message'), (
    ("become: yes\n", "Use 'true' instead of 'yes'"),
    ("become: 'true'\n", "Boolean 'become' should be the unquoted literal 'true'"),
    ("mode: Off\n", "Use 'false' instead of 'Off'"),
    ("become: False\n", "Use 'false' instead of 'False'"),
))
def test_bad_booleans(runner, text, message):
    results = runner.run_text(text)
    assert [r.message for r in results] == [message]


@pytest.mark.parametrize('text', (
    "become: true\n",
    "enabled: false\n",
    "count: 1\n",
    "answer: 'yes'\n",
    "become: '{{ use_become }}'\n",
))
def test_good_booleans(runner, text):
    assert runner.run_text(text) == []


def test_sequence_item_position(runner):
    results = runner.run_text("flags:\n  - true\n  - no\n")
    assert len(results) == 1
    assert results[0].position == "3:5"


def test_configured_boolean_keys():
    collection = RulesCollection(config=LintConfig(boolean_keys=['my_flag']))
    collection.register(BooleanLiteralRule())
    results = RunFromText(collection).run_text("my_flag: 0\n")
    assert len(results) == 1
