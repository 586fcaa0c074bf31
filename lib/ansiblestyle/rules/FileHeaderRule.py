"""Rule definition for the start of file layout."""
from typing import List

from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document
from ansiblestyle.rules import StyleRule


class FileHeaderRule(StyleRule):
    """Files start with a comment block, a blank line, '---' and a blank line."""

    id = "file-header"
    shortdesc = "File should start with a comment header and '---'"
    description = (
        "Start every file with a comment block explaining what it does, "
        "followed by a blank line, the '---' document start and another "
        "blank line before the content.")
    severity = "LOW"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchdocument(self, document: Document) -> List[MatchError]:
        lines = document.lines
        i = 0
        while i < len(lines) and not lines[i].strip():
            i += 1
        if i >= len(lines):
            return []

        if not lines[i].lstrip().startswith('#'):
            return [self._at(document, i, "File should start with a comment block")]
        while i < len(lines) and lines[i].lstrip().startswith('#'):
            i += 1

        if i >= len(lines) or lines[i].strip():
            return [self._at(
                document, i, "Comment block should be followed by a blank line")]
        while i < len(lines) and not lines[i].strip():
            i += 1

        if i >= len(lines) or lines[i].rstrip() != '---':
            return [self._at(
                document, i, "Expected '---' after the header comment block")]
        i += 1

        if i < len(lines) and lines[i].strip():
            return [self._at(document, i, "'---' should be followed by a blank line")]
        return []

    def _at(self, document: Document, index: int, message: str) -> MatchError:
        # past the last line the violation points at the last line
        index = min(index, len(document.lines) - 1)
        return self.create_matcherror(
            message=message,
            linenumber=index + 1,
            column=1,
            filename=document.path)
