"""Rule definition for fully qualified module names."""
from typing import List

from ansiblestyle.constants import BUILTIN_MODULES, DEPRECATED_KEYS
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, Task


class FQCNRule(StyleRule):
    """Use FQCN for module actions."""

    id = "fqcn"
    shortdesc = "Use FQCN for module actions"
    description = (
        "Modules are invoked by their fully qualified collection name, "
        "such as 'ansible.builtin.service' instead of 'service'.")
    severity = "MEDIUM"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        if task.kind not in (Kind.TASK, Kind.INCLUDE) or task.module is None:
            return []
        action = task.action
        if action in ('action', 'local_action') or '.' in action:
            return []
        # reported by deprecated-options
        if action in DEPRECATED_KEYS:
            return []
        if action in BUILTIN_MODULES:
            message = f"Use FQCN for module actions, such as 'ansible.builtin.{action}'"
        else:
            message = f"Use the fully qualified collection name for '{action}'"
        return [self.match_at(document, task.module.key, message)]
