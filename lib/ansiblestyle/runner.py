"""Runner implementation."""
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Optional, Set

from ansiblestyle import file_utils
from ansiblestyle._internal.rules import LoadingFailureRule, ParseErrorRule
from ansiblestyle.config import LintConfig, load_config
from ansiblestyle.constants import DEFAULT_RULESDIR
from ansiblestyle.errors import MatchError, ParseError
from ansiblestyle.logger import initialize_logger
from ansiblestyle.parser import parse
from ansiblestyle.rules import RulesCollection

_logger = logging.getLogger(__name__)


@dataclass
class LintResult:
    """Class that tracks result of linting."""

    matches: List[MatchError]
    files: Set[str]


class Runner(object):
    """Runner class performs the linting process."""

    def __init__(
            self,
            rules: RulesCollection,
            *paths: str,
            tags: FrozenSet[Any] = frozenset(),
            skip_list: FrozenSet[Any] = frozenset(),
            exclude_paths: Optional[List[str]] = None,
            verbosity: int = 0,
            checked_files: Optional[Set[str]] = None,
            workers: Optional[int] = None) -> None:
        """Initialize a Runner instance."""
        self.rules = rules
        self.paths = paths
        self.tags = tags
        self.skip_list = skip_list
        self._update_exclude_paths(exclude_paths or [])
        self.verbosity = verbosity
        if checked_files is None:
            checked_files = set()
        self.checked_files = checked_files
        self.workers = workers

    def _update_exclude_paths(self, exclude_paths: List[str]) -> None:
        if exclude_paths:
            # These will be (potentially) relative paths
            paths = file_utils.expand_paths_vars(exclude_paths)
            # The list of files given to the runner can contain both relative
            # and absolute paths, we need to cover both bases.
            self.exclude_paths = paths + [os.path.abspath(p) for p in paths]
        else:
            self.exclude_paths = []

    def is_excluded(self, file_path: str) -> bool:
        """Verify if a file path should be excluded."""
        # Any will short-circuit as soon as something returns True, but will
        # be poor performance for the case where the path under question is
        # not excluded.
        return any(file_path.startswith(path) for path in self.exclude_paths)

    def _files(self) -> List[str]:
        files: List[str] = []
        for path in self.paths:
            if self.is_excluded(path) or self.is_excluded(os.path.abspath(path)):
                _logger.debug("Excluding %s", path)
                continue
            path = file_utils.normpath(path)
            # remove duplicates and files that have already been checked
            if path in files or path in self.checked_files:
                _logger.debug("Skipping %s, already checked", path)
                continue
            files.append(path)
        return files

    def run(self) -> List[MatchError]:
        """Execute the linting process."""
        files = self._files()
        matches: Set[MatchError] = set()
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            for found in executor.map(self._lint_file, files):
                matches.update(found)
        # update list of checked files
        self.checked_files.update(files)

        return sorted(matches)

    def lint(self) -> LintResult:
        """Run and return the matches together with the files examined."""
        files = set(self._files())
        return LintResult(matches=self.run(), files=files)

    def _lint_file(self, path: str) -> List[MatchError]:
        """Parse and check one file, turning its failures into matches."""
        _logger.debug("Examining %s", path)
        try:
            text = file_utils.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("Unable to read %s: %s", path, exc)
            return [MatchError(
                message=f"Failed to load or parse file: {exc}",
                filename=path,
                rule=LoadingFailureRule())]

        try:
            document = parse(text, path)
        except ParseError as exc:
            _logger.warning("Unable to parse %s: %s", path, exc)
            return [MatchError(
                message=exc.message,
                linenumber=exc.line,
                column=exc.column,
                filename=path,
                rule=ParseErrorRule())]

        return self.rules.run(
            document, tags=set(self.tags), skip_list=self.skip_list)


def lint(paths: Iterable[str], config: Optional[LintConfig] = None) -> LintResult:
    """Lint files with the default rules and the configuration found."""
    if config is None:
        config = load_config()
    initialize_logger(config.verbosity)
    rules = RulesCollection([DEFAULT_RULESDIR], config=config)
    runner = Runner(
        rules,
        *paths,
        tags=frozenset(config.tags),
        skip_list=frozenset(config.skip_list),
        exclude_paths=config.exclude_paths,
        verbosity=config.verbosity,
        workers=config.workers)
    return runner.lint()
