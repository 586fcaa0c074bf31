"""Rule definition for boolean values."""
from typing import Iterator, List, Optional, Tuple

from ansiblestyle.constants import BOOLEAN_WORDS, FALSE_LITERAL, TRUE_LITERAL
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Content, Document, Mapping, MappingEntry, Scalar, Sequence
from ansiblestyle.rules import StyleRule

_TRUTHY = frozenset(['yes', 'true', 'on', '1'])


def _walk(
        node: Content,
        entry: Optional[MappingEntry] = None) -> Iterator[Tuple[Optional[MappingEntry], Scalar]]:
    if isinstance(node, Scalar):
        yield entry, node
    elif isinstance(node, Mapping):
        for child in node.entries:
            yield from _walk(child.value, child)
    elif isinstance(node, Sequence):
        for item in node:
            yield from _walk(item)


def _literal(value: str) -> str:
    return TRUE_LITERAL if value.lower() in _TRUTHY else FALSE_LITERAL


class BooleanLiteralRule(StyleRule):
    """Booleans are written as the literals true and false."""

    id = "boolean-literal"
    shortdesc = "Use 'true' and 'false' for booleans"
    description = (
        "Write booleans as unquoted lowercase 'true' or 'false'. Other YAML "
        "1.1 spellings such as 'yes', 'off' or 'True' are reported anywhere. "
        "Keys that only take a boolean are also reported when they hold 1, 0 "
        "or a quoted boolean.")
    severity = "MEDIUM"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        boolean_keys = self.config.all_boolean_keys
        matches = []
        for content in document.contents:
            for entry, scalar in _walk(content):
                where = entry.key if entry is not None else scalar
                on_boolean_key = entry is not None and entry.key.value in boolean_keys
                value = scalar.value
                if scalar.tag is not None or scalar.is_block:
                    continue
                if not scalar.is_quoted:
                    if value in BOOLEAN_WORDS and value not in (TRUE_LITERAL, FALSE_LITERAL):
                        matches.append(self.match_at(
                            document, where,
                            f"Use '{_literal(value)}' instead of '{value}'"))
                    elif on_boolean_key and value in ('1', '0'):
                        matches.append(self.match_at(
                            document, where,
                            f"Use '{_literal(value)}' instead of '{value}' "
                            f"for '{entry.key.value}'"))
                elif on_boolean_key and (value in BOOLEAN_WORDS or value in ('1', '0')):
                    matches.append(self.match_at(
                        document, where,
                        f"Boolean '{entry.key.value}' should be the unquoted "
                        f"literal '{_literal(value)}'"))
        return matches
