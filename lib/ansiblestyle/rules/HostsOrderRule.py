"""Rule definition for the order of play keys."""
from typing import List, Tuple

from ansiblestyle.constants import PLAY_DECLARATION_KEYS, PLAY_SECTION_ORDER
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, MappingEntry
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, Play, iter_out_of_order


def _rank(entry: MappingEntry) -> Tuple[int, int, str]:
    key = entry.key.value
    if key in PLAY_DECLARATION_KEYS:
        return (0, 0, "")
    if key in PLAY_SECTION_ORDER:
        return (2, PLAY_SECTION_ORDER.index(key), "")
    return (1, 0, key)


class HostsOrderRule(StyleRule):
    """Play keys follow the declaration, options, sections order."""

    id = "hosts-order"
    shortdesc = "Play keys are out of order"
    description = (
        "A play starts with its declaration ('name' and 'hosts'), followed "
        "by its options in alphabetical order, then 'pre_tasks', 'roles', "
        "'tasks', 'post_tasks' and 'handlers'.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchplay(self, document: Document, play: Play) -> List[MatchError]:
        if play.kind is not Kind.PLAY:
            return []
        return [
            self.match_at(
                document, entry.key,
                f"'{entry.key.value}' should come before '{previous.key.value}'")
            for entry, previous in iter_out_of_order(play.mapping.entries, _rank)]
