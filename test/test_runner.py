"""Validate the runner."""
import os

import pytest

from ansiblestyle.config import LintConfig
from ansiblestyle.runner import LintResult, Runner, lint

GOOD = """\
# Ping.

---

- ansible.builtin.ping:
"""

NO_HEADER = """\
- ansible.builtin.ping:
"""

BROKEN = """\
# Broken.

---

- name: "oops
"""


@pytest.fixture
def playbooks(tmp_path):
    paths = {}
    for name, text in (('good', GOOD), ('no_header', NO_HEADER), ('broken', BROKEN)):
        path = tmp_path / f"{name}.yml"
        path.write_text(text, encoding='utf-8')
        paths[name] = str(path)
    return paths


def test_runner_good_file(default_rules_collection, playbooks) -> None:
    assert Runner(default_rules_collection, playbooks['good']).run() == []


def test_runner_byte_order_mark(default_rules_collection, tmp_path) -> None:
    path = tmp_path / "bom.yml"
    path.write_text("\ufeff" + GOOD, encoding='utf-8')
    assert Runner(default_rules_collection, str(path)).run() == []


def test_runner_isolates_parse_errors(default_rules_collection, playbooks) -> None:
    """A file that fails to parse does not stop the others."""
    result = Runner(
        default_rules_collection,
        playbooks['broken'],
        playbooks['no_header']).run()
    by_rule = {}
    for match in result:
        by_rule.setdefault(match.rule_id, []).append(match)
    assert len(by_rule['parse-error']) == 1
    parse_error = by_rule['parse-error'][0]
    assert parse_error.filename.endswith('broken.yml')
    assert parse_error.position == "5:9"
    assert len(by_rule['file-header']) == 1
    assert by_rule['file-header'][0].filename.endswith('no_header.yml')
    # nothing but the parse error is reported for the broken file
    assert [m for m in result if m.filename.endswith('broken.yml')] == [parse_error]


def test_runner_missing_file(default_rules_collection, tmp_path) -> None:
    missing = str(tmp_path / 'missing.yml')
    result = Runner(default_rules_collection, missing).run()
    assert len(result) == 1
    assert result[0].rule_id == 'load-failure'
    assert "Failed to load or parse file" in result[0].message


def test_runner_exclude_paths(default_rules_collection, playbooks) -> None:
    runner = Runner(
        default_rules_collection,
        playbooks['no_header'],
        exclude_paths=[playbooks['no_header']])
    assert runner.run() == []


def test_runner_checked_files(default_rules_collection, playbooks) -> None:
    """Files already checked are skipped, duplicates are linted once."""
    checked = set()
    first = Runner(
        default_rules_collection,
        playbooks['no_header'],
        playbooks['no_header'],
        checked_files=checked).run()
    assert len([m for m in first if m.rule_id == 'file-header']) == 1
    assert len(checked) == 1
    second = Runner(
        default_rules_collection,
        playbooks['no_header'],
        checked_files=checked).run()
    assert second == []


def test_runner_skip_list(default_rules_collection, playbooks) -> None:
    result = Runner(
        default_rules_collection,
        playbooks['no_header'],
        skip_list=frozenset(['file-header'])).run()
    assert 'file-header' not in {m.rule_id for m in result}


def test_runner_tags(default_rules_collection, playbooks) -> None:
    result = Runner(
        default_rules_collection,
        playbooks['no_header'],
        tags=frozenset(['fqcn'])).run()
    assert result == []


def test_runner_workers(default_rules_collection, playbooks) -> None:
    """The result does not depend on the number of workers."""
    paths = sorted(playbooks.values())
    single = Runner(default_rules_collection, *paths, workers=1).run()
    many = Runner(default_rules_collection, *paths, workers=4).run()
    assert single == many
    assert single == sorted(single)


def test_lint_entry_point(playbooks) -> None:
    config = LintConfig(skip_list=['trailing-newline'])
    result = lint([playbooks['good'], playbooks['no_header']], config=config)
    assert isinstance(result, LintResult)
    assert {os.path.basename(f) for f in result.files} == {'good.yml', 'no_header.yml'}
    assert [m.rule_id for m in result.matches] == ['file-header']
    assert result.matches[0].to_dict() == {
        'file_path': result.matches[0].filename,
        'line': 1,
        'column': 1,
        'rule_id': 'file-header',
        'severity': 'LOW',
        'message': 'File should start with a comment block',
    }
