"""Rule definition for deprecated keys."""
from typing import List

from ansiblestyle.constants import DEPRECATED_KEYS, DEPRECATED_PLAY_KEYS
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, Play, Task


class DeprecatedOptionsRule(StyleRule):
    """Deprecated options are replaced by their successors."""

    id = "deprecated-options"
    shortdesc = "Deprecated option used"
    description = (
        "Options such as 'sudo', 'with_items' or 'include' are deprecated. "
        "The violation names the option that replaces them.")
    severity = "HIGH"
    tags = ["deprecations"]
    version_added = "v0.1.0"

    def matchplay(self, document: Document, play: Play) -> List[MatchError]:
        matches = []
        for entry in play.mapping.entries:
            key = entry.key.value
            if key in DEPRECATED_PLAY_KEYS:
                replacement = DEPRECATED_PLAY_KEYS[key]
            elif play.kind is Kind.PLAY and key in DEPRECATED_KEYS:
                replacement = DEPRECATED_KEYS[key]
            else:
                continue
            matches.append(self._match(document, entry, replacement))
        return matches

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        return [
            self._match(document, entry, DEPRECATED_KEYS[entry.key.value])
            for entry in task.mapping.entries
            if entry.key.value in DEPRECATED_KEYS]

    def _match(self, document: Document, entry, replacement: str) -> MatchError:
        return self.match_at(
            document, entry.key,
            f"'{entry.key.value}' is deprecated, use {replacement} instead")
