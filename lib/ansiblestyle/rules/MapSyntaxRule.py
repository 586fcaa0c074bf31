"""Rule definition for module argument syntax."""
import re
from typing import List

from ansiblestyle.constants import FREE_FORM_MODULES
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Scalar
from ansiblestyle.rules import StyleRule
from ansiblestyle.utils import Kind, Task, short_module_name

_KEY_VALUE_RE = re.compile(r"(^|\s)[\w.-]+=")


class MapSyntaxRule(StyleRule):
    """Module arguments are a mapping, not a key=value string."""

    id = "map-syntax"
    shortdesc = "Use map syntax for module arguments"
    description = (
        "Pass module arguments as a YAML mapping instead of an inline "
        "'key=value' string. Modules that take a free-form command are "
        "exempt.")
    severity = "MEDIUM"
    tags = ["formatting"]
    version_added = "v0.1.0"

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        if task.kind not in (Kind.TASK, Kind.INCLUDE) or task.module is None:
            return []
        value = task.module.value
        if not isinstance(value, Scalar) or value.is_null:
            return []
        module = task.module_name
        arguments = value.value
        if module in ('action', 'local_action'):
            module, _, arguments = arguments.strip().partition(' ')
            module = short_module_name(module)
        if module in FREE_FORM_MODULES:
            return []
        if not _KEY_VALUE_RE.search(arguments):
            return []
        return [self.match_at(
            document, value,
            f"Module '{task.action}' should get its arguments as a mapping, "
            f"not as 'key=value' pairs")]
