"""Rule definition for the order of task keys."""
from typing import List, Tuple

from ansiblestyle.constants import BLOCK_KEYS
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Mapping, MappingEntry
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, Task, is_loop_key, iter_out_of_order


def _alphabetical(entry: MappingEntry) -> str:
    return entry.key.value


class TaskOrderRule(StyleRule):
    """Task keys follow the name, tags, module, args, loop, options order."""

    id = "task-order"
    shortdesc = "Task keys are out of order"
    description = (
        "A task lists 'name', 'tags', the module with its parameters in "
        "alphabetical order, 'args', the loop keys and then the remaining "
        "task options in alphabetical order. Blocks keep 'block', 'rescue' "
        "and 'always' in that order.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        if task.kind is Kind.UNKNOWN:
            return []

        def rank(entry: MappingEntry) -> Tuple[int, int, str]:
            key = entry.key.value
            if key == 'name':
                return (0, 0, "")
            if key == 'tags':
                return (1, 0, "")
            if task.kind is Kind.BLOCK and key in BLOCK_KEYS:
                return (2, BLOCK_KEYS.index(key), "")
            if entry is task.module:
                return (2, 0, "")
            if key == 'args':
                return (3, 0, "")
            if is_loop_key(key):
                return (4, int(key == 'loop_control'), "")
            return (5, 0, key)

        matches = [
            self._match(document, entry, previous)
            for entry, previous in iter_out_of_order(task.mapping.entries, rank)]

        if task.kind is not Kind.BLOCK:
            for holder in (task.module, task.args):
                if holder is not None and isinstance(holder.value, Mapping):
                    matches.extend(
                        self._match(document, entry, previous)
                        for entry, previous in iter_out_of_order(
                            holder.value.entries, _alphabetical))
        return matches

    def _match(self, document: Document, entry: MappingEntry, previous: MappingEntry) -> MatchError:
        return self.match_at(
            document, entry.key,
            f"'{entry.key.value}' should come before '{previous.key.value}'")
