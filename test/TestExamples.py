"""Assure samples produced desire outcomes."""
import os

from ansiblestyle.runner import Runner


def test_example(default_rules_collection, examples_dir):
    """example.yml breaks every style rule at least once."""
    path = os.path.join(examples_dir, 'example.yml')
    result = Runner(default_rules_collection, path).run()
    found = {match.rule_id for match in result}
    expected = {
        rule.id for rule in default_rules_collection
        if 'core' not in rule.tags}
    assert found == expected
    assert len(expected) == 13


def test_example_good(default_rules_collection, examples_dir):
    """A playbook that follows the styleguide gives no violation."""
    path = os.path.join(examples_dir, 'good.yml')
    result = Runner(default_rules_collection, path).run()
    assert result == []


def test_example_malformed(default_rules_collection, examples_dir):
    """An unclosed quote stops the file with a single parse-error."""
    path = os.path.join(examples_dir, 'malformed.yml')
    result = Runner(default_rules_collection, path).run()
    assert len(result) == 1
    assert result[0].rule_id == 'parse-error'
    assert result[0].linenumber == 5
    assert result[0].column == 9
    assert "quoted scalar" in result[0].message


def test_example_is_deterministic(default_rules_collection, examples_dir):
    path = os.path.join(examples_dir, 'example.yml')
    first = Runner(default_rules_collection, path).run()
    second = Runner(default_rules_collection, path).run()
    assert [m.to_dict() for m in first] == [m.to_dict() for m in second]
