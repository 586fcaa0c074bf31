"""PyTest fixtures for testing the project."""
import os

import pytest

from ansiblestyle.constants import DEFAULT_RULESDIR
from ansiblestyle.rules import RulesCollection

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), '..', 'examples')


@pytest.fixture
def default_rules_collection() -> RulesCollection:
    """Return default rule collection."""
    assert os.path.isdir(DEFAULT_RULESDIR)
    return RulesCollection(rulesdirs=[DEFAULT_RULESDIR])


@pytest.fixture
def examples_dir() -> str:
    return os.path.normpath(EXAMPLES_DIR)
