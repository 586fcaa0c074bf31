"""Rule definition for blank lines and indentation."""
from typing import Iterator, List

from ansiblestyle.errors import MatchError
from ansiblestyle.model import Content, Document, Mapping, Scalar, Sequence
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, iter_adjacent

INDENT = 2


def _collections(node: Content) -> Iterator[Content]:
    if isinstance(node, (Mapping, Sequence)) and not node.flow:
        yield node
        children = node if isinstance(node, Sequence) else (e.value for e in node.entries)
        for child in children:
            yield from _collections(child)


class SpacingRule(StyleRule):
    """Plays and tasks are separated by blank lines and indented by two."""

    id = "spacing"
    shortdesc = "Blank lines or indentation do not follow the styleguide"
    description = (
        "Adjacent plays and tasks are separated by a blank line. Block "
        "collections are indented two spaces from the key that holds them "
        "and the content of a list item starts one space after its dash. "
        "Blank lines around include statements are left to include-format.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        matches = []
        for _, previous_kind, item, kind in iter_adjacent(document):
            if Kind.INCLUDE in (previous_kind, kind):
                continue
            if item.blank_lines_before == 0:
                matches.append(self.match_at(
                    document, item.dash,
                    "Missing blank line before this item"))

        for content in document.contents:
            for node in _collections(content):
                if isinstance(node, Mapping):
                    matches.extend(self._check_mapping(document, node))
                else:
                    matches.extend(self._check_sequence(document, node))
        return matches

    def _check_mapping(self, document: Document, mapping: Mapping) -> List[MatchError]:
        matches = []
        for entry in mapping.entries:
            value = entry.value
            if not isinstance(value, (Mapping, Sequence)) or value.flow:
                continue
            if value.span.line == entry.key.span.line:
                continue
            expected = entry.key.span.column + INDENT
            if value.span.column != expected:
                matches.append(self.match_at(
                    document, value,
                    f"Content of '{entry.key.value}' should be indented to "
                    f"column {expected}, found column {value.span.column}"))
        return matches

    def _check_sequence(self, document: Document, sequence: Sequence) -> List[MatchError]:
        matches = []
        for item in sequence.items:
            node = item.node
            if item.dash is None or node.span.line != item.dash.line:
                continue
            if isinstance(node, Scalar) and node.is_null:
                continue
            column = node.span.column
            if node.properties is not None:
                column = node.properties.mark.column
            expected = item.dash.column + INDENT
            if column != expected:
                matches.append(self.match_at(
                    document, node,
                    "Expected exactly one space after '-'"))
        return matches
