"""All internal ansible-style rules."""
import copy
import glob
import importlib.abc
import importlib.util
import logging
import os
from typing import Iterable, Iterator, List, Optional, Set, Union

from ansiblestyle._internal.rules import (
    BaseRule,
    InternalRuleErrorRule,
    LoadingFailureRule,
    ParseErrorRule,
)
from ansiblestyle.config import LintConfig
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Mark, Node, Span
from ansiblestyle.utils import Play, Task, iter_plays, iter_tasks

_logger = logging.getLogger(__name__)


class StyleRule(BaseRule):
    """Base class of style rules.

    A rule only has to implement ``check``. The default ``check`` calls the
    optional hooks ``matchdocument``, ``matchplay`` and ``matchtask`` and
    gathers what they return.
    """

    config = LintConfig()

    def __repr__(self) -> str:
        """Return a StyleRule instance representation."""
        return self.id + ": " + self.shortdesc

    def create_matcherror(
            self,
            message: Optional[str] = None,
            linenumber: int = 1,
            column: int = 1,
            details: str = "",
            filename: Optional[str] = None,
            tag: str = "") -> MatchError:
        match = MatchError(
            message=message,
            linenumber=linenumber,
            column=column,
            details=details,
            filename=filename,
            rule=copy.copy(self)
            )
        if tag:
            match.tag = tag
        return match

    def match_at(
            self,
            document: Document,
            where: Union[Node, Span, Mark],
            message: Optional[str] = None,
            details: str = "") -> MatchError:
        """Create a match pointing at a position or the start of a node."""
        if isinstance(where, Node):
            where = where.span
        return self.create_matcherror(
            message=message,
            linenumber=where.line,
            column=where.column,
            details=details,
            filename=document.path)

    def matchdocument(self, document: Document) -> List[MatchError]:
        return []

    def matchplay(self, document: Document, play: Play) -> List[MatchError]:
        return []

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        return []

    def check(self, document: Document) -> List[MatchError]:
        matches: List[MatchError] = []
        matches.extend(self.matchdocument(document))
        for play in iter_plays(document):
            matches.extend(self.matchplay(document, play))
        for task in iter_tasks(document):
            matches.extend(self.matchtask(document, task))
        return matches


def is_valid_rule(rule: object) -> bool:
    """Check if given rule is valid or not."""
    return isinstance(rule, BaseRule) and bool(rule.id) and bool(rule.shortdesc)


def load_plugins(directory: str) -> List[BaseRule]:
    """Return a list of rule classes."""
    result = []

    for pluginfile in sorted(glob.glob(os.path.join(directory, '[A-Za-z]*.py'))):

        pluginname = os.path.basename(pluginfile.replace('.py', ''))
        spec = importlib.util.spec_from_file_location(pluginname, pluginfile)
        # https://github.com/python/typeshed/issues/2793
        if spec and isinstance(spec.loader, importlib.abc.Loader):
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
            obj = getattr(module, pluginname)()
            result.append(obj)
    return result


class RulesCollection(object):
    """Container of the rules run against each document."""

    def __init__(
            self,
            rulesdirs: Optional[List[str]] = None,
            config: Optional[LintConfig] = None) -> None:
        """Initialize a RulesCollection instance."""
        if rulesdirs is None:
            rulesdirs = []
        self.config = config or LintConfig()
        self.rulesdirs = rulesdirs
        self.rules: List[BaseRule] = []
        # internal rules included in order to expose them for docs as they are
        # not directly loaded by our rule loader.
        self.rules.extend(
            [InternalRuleErrorRule(), ParseErrorRule(), LoadingFailureRule()])
        for rulesdir in self.rulesdirs:
            _logger.debug("Loading rules from %s", rulesdir)
            for rule in load_plugins(rulesdir):
                self.register(rule)
        self.rules = sorted(self.rules)

    def register(self, obj: BaseRule) -> None:
        if not is_valid_rule(obj):
            raise TypeError(f"{obj!r} is not a valid rule")
        if isinstance(obj, StyleRule):
            obj.config = self.config
        self.rules.append(obj)

    def __iter__(self) -> Iterator[BaseRule]:
        """Return the iterator over the rules in the RulesCollection."""
        return iter(self.rules)

    def __len__(self) -> int:
        """Return the length of the RulesCollection data."""
        return len(self.rules)

    def extend(self, more: Iterable[BaseRule]) -> None:
        for rule in more:
            self.register(rule)

    def selected(
            self,
            tags: Optional[Set[str]] = None,
            skip_list: Iterable[str] = frozenset()) -> List[BaseRule]:
        """Return the rules enabled by the tag and skip filters."""
        skip = set(skip_list)
        result = []
        for rule in self.rules:
            rule_definition = set(rule.tags)
            rule_definition.add(rule.id)
            if tags and rule_definition.isdisjoint(tags):
                continue
            if not rule_definition.isdisjoint(skip):
                continue
            result.append(rule)
        return result

    def run(
            self,
            document: Document,
            tags: Optional[Set[str]] = None,
            skip_list: Iterable[str] = frozenset()) -> List[MatchError]:
        return evaluate(document, self.selected(tags, skip_list))

    def __repr__(self) -> str:
        """Return a RulesCollection instance representation."""
        return "\n".join([rule.verbose()
                          for rule in sorted(self.rules, key=lambda x: x.id)])

    def listtags(self) -> str:
        tags = {}
        for rule in self.rules:
            for tag in rule.tags:
                tags.setdefault(tag, []).append(rule.id)
        results = []
        for tag in sorted(tags):
            results.append("{0} {1}".format(tag, tags[tag]))
        return "\n".join(results)


def evaluate(document: Document, rules: Iterable[BaseRule]) -> List[MatchError]:
    """Run every rule on a document and return the sorted violations.

    Each rule sees the same document and none sees another's output. A rule
    that raises is reported once as an internal-error violation carrying the
    rule id as tag; the remaining rules still run.
    """
    matches: Set[MatchError] = set()
    for rule in rules:
        try:
            found = rule.check(document)
        except Exception as exc:  # pylint: disable=broad-except
            _logger.error(
                "Rule %s failed on %s: %s", rule.id, document.path, exc,
                exc_info=True)
            found = [MatchError(
                message=f"Rule '{rule.id}' raised {exc.__class__.__name__}: {exc}",
                linenumber=1,
                column=1,
                filename=document.path,
                rule=InternalRuleErrorRule(),
                tag=rule.id)]
        matches.update(found)
    return sorted(matches, key=_sort_key)


def _sort_key(match: MatchError):
    return (match.filename, match.linenumber, match.column, match.rule_id, match.message)
