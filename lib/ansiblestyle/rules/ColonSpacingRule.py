"""Rule definition for spaces around the key-value colon."""
from typing import List

from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import iter_entries


class ColonSpacingRule(StyleRule):
    """Use exactly one space after ':' and none before it."""

    id = "colon-spacing"
    shortdesc = "Key and value should be separated by ': '"
    description = (
        "A key is followed directly by its colon, and the colon by exactly "
        "one space when the value is on the same line.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        matches = []
        for content in document.contents:
            for entry in iter_entries(content):
                if entry.space_before_colon:
                    matches.append(self.match_at(
                        document, entry.colon,
                        f"Found {entry.space_before_colon} space(s) before ':' "
                        f"after '{entry.key.value}', expected none"))
                elif entry.space_after_colon is not None and entry.space_after_colon != 1:
                    matches.append(self.match_at(
                        document, entry.colon,
                        f"Found {entry.space_after_colon} spaces after ':' "
                        f"after '{entry.key.value}', expected one"))
        return matches
