"""Exceptions and error representations."""
import functools
from typing import Any, Dict, Optional

from ansiblestyle._internal.rules import BaseRule, InternalRuleErrorRule
from ansiblestyle.file_utils import normpath


class ParseError(ValueError):
    """Raised when a file cannot be read as YAML."""

    def __init__(
            self,
            message: str,
            line: int = 1,
            column: int = 1,
            path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.path = path

    def __str__(self) -> str:
        return "%s:%s:%s: %s" % (
            self.path or "<string>", self.line, self.column, self.message)


class ConfigError(ValueError):
    """Raised when a configuration file is invalid."""


# Use ordering only based on message, file, line and column
@functools.total_ordering
class MatchError(ValueError):
    """Rule violation detected during linting.

    It can be raised as Exception but also just added to the list of found
    rules violations.

    Note that line numbers are not always provided and we then default to 1.
    """

    tag = ""

    def __init__(
            self,
            message: Optional[str] = None,
            linenumber: int = 1,
            column: int = 1,
            details: str = "",
            filename: Optional[str] = None,
            rule: BaseRule = InternalRuleErrorRule(),
            tag: Optional[str] = None) -> None:
        """Initialize a MatchError instance."""
        super().__init__(message)

        if rule.__class__ is InternalRuleErrorRule and not message:
            raise TypeError(
                f'{self.__class__.__name__}() missing a '
                "required argument: one of 'message' or 'rule'",
            )

        self.message = message or getattr(rule, 'shortdesc', "")
        self.linenumber = linenumber
        self.column = column
        self.details = details
        self.filename = ""
        if filename:
            self.filename = normpath(filename)
        self.rule = rule
        if tag:
            self.tag = tag

    def __repr__(self) -> str:
        """Return a MatchError instance representation."""
        formatstr = "[{0}] ({1}) matched {2}:{3}:{4} {5}"
        _id = getattr(self.rule, "id", "000")

        return formatstr.format(
            _id, self.message, self.filename, self.linenumber, self.column,
            self.details)

    @property
    def rule_id(self) -> str:
        return str(getattr(self.rule, 'id', ''))

    @property
    def severity(self) -> str:
        return str(getattr(self.rule, 'severity', ''))

    @property
    def position(self) -> str:
        """Return error positioniting, with column number if available."""
        return f"{self.linenumber}:{self.column}"

    @property
    def _hash_key(self) -> Any:
        # line attr is knowingly excluded, as dict is not hashable
        return (
            self.filename,
            self.linenumber,
            self.column,
            self.rule_id,
            self.message,
            self.tag,
        )

    def __lt__(self, other: object) -> bool:
        """Return whether the current object is less than the other."""
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool(self._hash_key < other._hash_key)

    def __hash__(self) -> int:
        """Return a hash value of the MatchError instance."""
        return hash(self._hash_key)

    def __eq__(self, other: object) -> bool:
        """Identify whether the other object represents the same rule match."""
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.__hash__() == other.__hash__()

    def to_dict(self) -> Dict[str, Any]:
        """Return the violation in its external shape."""
        return {
            'file_path': self.filename,
            'line': self.linenumber,
            'column': self.column,
            'rule_id': self.rule_id,
            'severity': self.severity,
            'message': self.message,
        }
