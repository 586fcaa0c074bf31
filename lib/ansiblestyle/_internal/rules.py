"""Internally used rule classes."""
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ansiblestyle.errors import MatchError
    from ansiblestyle.model import Document


class BaseRule:
    """Root class used by Rules."""

    id: str = ""
    tags: List[str] = []
    shortdesc: str = ""
    description: str = ""
    version_added: str = ""
    severity: str = ""

    def check(self, document: "Document") -> List["MatchError"]:
        """Return all violations of this rule found in the document."""
        return []

    def verbose(self) -> str:
        return self.id + ": " + self.shortdesc + "\n  " + self.description

    def __lt__(self, other: "BaseRule") -> bool:
        """Enable us to sort rules by their id."""
        return self.id < other.id

    def __repr__(self) -> str:
        return self.id + ": " + self.shortdesc


class InternalRuleErrorRule(BaseRule):
    """Unexpected internal error."""

    id = "internal-error"
    shortdesc = "Unexpected internal error"
    description = (
        "A rule raised an exception while checking the file. Instead of "
        "stopping the linter the failure is reported as a violation and the "
        "remaining rules keep running. The id of the failing rule is kept in "
        "the violation tag.")
    severity = "VERY_HIGH"
    tags = ["core"]
    version_added = "v0.1.0"


class ParseErrorRule(BaseRule):
    """The file is not valid YAML."""

    id = "parse-error"
    shortdesc = "YAML parse error"
    description = (
        "The file could not be parsed, so no style rule was run on it. The "
        "violation points at the line and column where parsing stopped.")
    severity = "VERY_HIGH"
    tags = ["core"]
    version_added = "v0.1.0"


class LoadingFailureRule(BaseRule):
    """File loading failure."""

    id = "load-failure"
    shortdesc = "Failed to load or parse file"
    description = "Linter failed to read the file from disk."
    severity = "VERY_HIGH"
    tags = ["core"]
    version_added = "v0.1.0"
