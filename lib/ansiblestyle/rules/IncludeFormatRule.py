"""Rule definition for include statements."""
from typing import List, Optional

from ansiblestyle.constants import INCLUDE_FILE_MODULES
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Mapping, MappingEntry, Scalar
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, iter_adjacent, iter_plays, iter_tasks, short_module_name


def _filename(entry: MappingEntry) -> Optional[Scalar]:
    value = entry.value
    if isinstance(value, Mapping):
        file_entry = value.get('file')
        value = file_entry.value if file_entry is not None else None
    if isinstance(value, Scalar) and not value.is_null:
        return value
    return None


class IncludeFormatRule(StyleRule):
    """Include statements quote their filename and group tightly."""

    id = "include-format"
    shortdesc = "Include statement is badly formatted"
    description = (
        "The file name given to include and import statements is quoted. "
        "Consecutive single-line includes are not separated by blank lines, "
        "while a multi-line include is separated from its neighbours by one "
        "blank line.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        entries = []
        for play in iter_plays(document):
            if play.kind is Kind.INCLUDE:
                entries.extend(
                    e for e in play.mapping.entries
                    if short_module_name(e.key.value) in INCLUDE_FILE_MODULES)
        for task in iter_tasks(document):
            if task.kind is Kind.INCLUDE and task.module_name in INCLUDE_FILE_MODULES:
                entries.append(task.module)

        matches = []
        for entry in entries:
            filename = _filename(entry)
            if filename is not None and not filename.is_quoted and filename.tag is None:
                matches.append(self.match_at(
                    document, filename,
                    f"File name of '{entry.key.value}' should be quoted"))

        for previous, previous_kind, item, kind in iter_adjacent(document):
            if Kind.INCLUDE not in (previous_kind, kind):
                continue
            compact = (
                previous_kind is kind is Kind.INCLUDE
                and not previous.node.span.is_multiline
                and not item.node.span.is_multiline)
            blank = item.blank_lines_before > 0
            if compact and blank:
                matches.append(self.match_at(
                    document, item.dash,
                    "No blank line between single-line include statements"))
            elif not compact and not blank:
                matches.append(self.match_at(
                    document, item.dash,
                    "Missing blank line around a multi-line include statement"))
        return matches
