"""Utility functions related to file operations."""
import logging
import os
from typing import List, Union

_logger = logging.getLogger(__name__)


def normpath(path: Union[str, "os.PathLike[str]"]) -> str:
    """
    Normalize a path in order to provide a more consistent output.

    Currently it generates a relative path but in the future we may want to
    make this user configurable.
    """
    # convertion to string in order to allow receiving non string objects
    relpath = os.path.relpath(str(path))
    abspath = os.path.abspath(str(path))
    # we avoid returning relative paths that endup at root level
    if abspath in relpath:
        return abspath
    return relpath


def expand_path_vars(path: str) -> str:
    """Expand the environment or ~ variables in a path string."""
    path = path.strip()
    path = os.path.expanduser(path)
    path = os.path.expandvars(path)
    return path


def expand_paths_vars(paths: List[str]) -> List[str]:
    """Expand the environment or ~ variables in a list."""
    paths = [expand_path_vars(p) for p in paths]
    return paths


def read_text(path: str) -> str:
    """Read a playbook as UTF-8 text, keeping its newlines untouched."""
    _logger.debug("Reading %s", path)
    with open(path, mode='r', encoding='utf-8', newline='') as f:
        return f.read()
