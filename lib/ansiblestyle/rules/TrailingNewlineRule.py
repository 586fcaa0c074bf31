"""Rule definition for the end of file layout."""
from typing import List

from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document
from ansiblestyle.rules import StyleRule


class TrailingNewlineRule(StyleRule):
    """Files end with exactly one newline."""

    id = "trailing-newline"
    shortdesc = "File should end with a single newline"
    description = (
        "The last line of a file ends with a newline character and no blank "
        "lines follow it.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        lines = document.lines
        if not document.text:
            return []
        if not document.text.endswith('\n'):
            return [self.create_matcherror(
                message="No newline at end of file",
                linenumber=len(lines),
                column=len(lines[-1]) + 1,
                filename=document.path)]
        if lines[-1].strip():
            return []
        last = len(lines)
        while last > 0 and not lines[last - 1].strip():
            last -= 1
        return [self.create_matcherror(
            message="Too many blank lines at end of file",
            linenumber=last + 1,
            column=1,
            filename=document.path)]
