"""Test utils for ansible-style rules."""
import os
import tempfile
from typing import List

from ansiblestyle.errors import MatchError
from ansiblestyle.parser import parse
from ansiblestyle.rules import RulesCollection
from ansiblestyle.runner import Runner


class RunFromText(object):
    """Use Runner on temp files created from unittest text snippets."""

    def __init__(self, collection: RulesCollection) -> None:
        """Initialize a RunFromText instance with rules collection."""
        self.collection = collection

    def _call_runner(self, path: str) -> List[MatchError]:
        runner = Runner(self.collection, path)
        return runner.run()

    def run_text(self, text: str, path: str = "playbook.yml") -> List[MatchError]:
        """Parse text in memory and return the violations found in it."""
        return self.collection.run(parse(text, path))

    def run_playbook(self, playbook_text: str) -> List[MatchError]:
        """Lint a playbook written to a temporary file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "playbook.yml")
            with open(path, mode="w", encoding="utf-8", newline="") as fh:
                fh.write(playbook_text)
            return self._call_runner(path)
