"""Rule definition for scalar quoting."""
from typing import List, Set

from ansiblestyle.constants import BOOLEAN_WORDS, INCLUDE_FILE_MODULES, NULL_WORDS
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Mapping, Scalar, Span
from ansiblestyle.rules import StyleRule
from ansiblestyle.text import has_leading_zero, is_number, is_plain_safe
from ansiblestyle.utils import Kind, iter_plays, iter_scalars, iter_tasks, short_module_name


def _preview(value: str, width: int = 40) -> str:
    value = value.replace('\n', ' ')
    if len(value) > width:
        return value[:width - 3] + '...'
    return value


def _is_typed(value: str) -> bool:
    return value in BOOLEAN_WORDS or is_number(value) or value in NULL_WORDS


class QuotingRule(StyleRule):
    """Strings are quoted, other scalars are not."""

    id = "quoting"
    shortdesc = "Quote strings, and only strings"
    description = (
        "String values are single quoted. Double quotes are kept for values "
        "that need escape sequences or hold a single quote, and double quotes "
        "nested in a string go inside single ones. Booleans, numbers, null and the "
        "expressions of keys such as 'when' or 'register' stay unquoted. "
        "The names of plays and tasks may be left unquoted.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        names = self._name_spans(document)
        includes = self._include_spans(document)
        boolean_keys = self.config.all_boolean_keys
        local_keys = self.config.all_local_keys

        matches = []
        for content in document.contents:
            for key, scalar in iter_scalars(content):
                if key in boolean_keys or scalar.span in includes:
                    continue
                if scalar.tag is not None or scalar.is_block or scalar.is_alias:
                    continue
                if scalar.is_quoted:
                    matches.extend(self._check_quoted(document, key, scalar, local_keys))
                elif key not in local_keys and scalar.span not in names:
                    if not scalar.is_null and not _is_typed(scalar.value):
                        matches.append(self.match_at(
                            document, scalar,
                            f"String should be quoted: {_preview(scalar.value)}"))
        return matches

    def _check_quoted(
            self, document: Document, key, scalar: Scalar, local_keys) -> List[MatchError]:
        value = scalar.value
        if key in local_keys and is_plain_safe(value) and not _is_typed(value):
            return [self.match_at(
                document, scalar,
                f"Expression of '{key}' should not be quoted: {_preview(value)}")]
        if value and _is_typed(value) and not has_leading_zero(value):
            return [self.match_at(
                document, scalar,
                f"Boolean, number or null should not be quoted: {_preview(value)}")]
        raw = scalar.raw
        if raw.startswith('"'):
            # escapes other than \" need double quotes
            if '\\' in raw[1:-1].replace('\\"', ''):
                return []
            if '"' in value and "'" not in value:
                return [self.match_at(
                    document, scalar,
                    "Nested quotes should be double quotes inside single quotes")]
            # a single quote nests in double quotes without escaping
            if "'" in value:
                return []
            return [self.match_at(
                document, scalar,
                f"Prefer single quotes when no escape is needed: {_preview(value)}")]
        if raw.startswith("'") and "''" in raw[1:-1] and '"' not in value:
            return [self.match_at(
                document, scalar,
                "Single quote inside a string should be nested in double quotes")]
        return []

    @staticmethod
    def _name_spans(document: Document) -> Set[Span]:
        mappings: List[Mapping] = [play.mapping for play in iter_plays(document)]
        mappings.extend(task.mapping for task in iter_tasks(document))
        spans = set()
        for mapping in mappings:
            entry = mapping.get('name')
            if entry is not None and isinstance(entry.value, Scalar):
                spans.add(entry.value.span)
        return spans

    @staticmethod
    def _include_spans(document: Document) -> Set[Span]:
        entries = []
        for play in iter_plays(document):
            if play.kind is Kind.INCLUDE:
                entries.extend(
                    e for e in play.mapping.entries
                    if short_module_name(e.key.value) in INCLUDE_FILE_MODULES)
        for task in iter_tasks(document):
            if task.kind is Kind.INCLUDE and task.module_name in INCLUDE_FILE_MODULES:
                entries.append(task.module)
        spans = set()
        for entry in entries:
            value = entry.value
            if isinstance(value, Mapping):
                file_entry = value.get('file')
                value = file_entry.value if file_entry is not None else None
            if isinstance(value, Scalar):
                spans.add(value.span)
        return spans
