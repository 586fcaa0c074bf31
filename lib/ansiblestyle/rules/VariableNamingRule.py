"""Rule definition for variable names."""
from typing import Iterator, List

from ansiblestyle.constants import SET_FACT_MODULES
from ansiblestyle.errors import MatchError
from ansiblestyle.model import Document, Mapping, Scalar, Sequence
from ansiblestyle.rules import StyleRule
from ansiblestyle.text import identifier_case, is_snake_case, to_snake_case
from ansiblestyle.utils import Kind, Play, Task


def _vars_keys(mapping: Mapping) -> Iterator[Scalar]:
    entry = mapping.get('vars')
    if entry is not None and isinstance(entry.value, Mapping):
        for var in entry.value.entries:
            # merge key
            if var.key.value != '<<':
                yield var.key


class VariableNamingRule(StyleRule):
    """Variables are named in snake_case."""

    id = "variable-naming"
    shortdesc = "Variable names should be snake_case"
    description = (
        "Variables defined with 'vars', 'vars_prompt', 'register', "
        "'set_fact' and the 'loop_var' and 'index_var' loop controls use "
        "lowercase letters, digits and underscores.")
    severity = "MEDIUM"
    tags = ["naming"]
    version_added = "v0.1.0"

    def matchplay(self, document: Document, play: Play) -> List[MatchError]:
        if play.kind is not Kind.PLAY:
            return []
        names = list(_vars_keys(play.mapping))
        prompts = play.mapping.get('vars_prompt')
        if prompts is not None and isinstance(prompts.value, Sequence):
            for prompt in prompts.value:
                if isinstance(prompt, Mapping):
                    entry = prompt.get('name')
                    if entry is not None and isinstance(entry.value, Scalar):
                        names.append(entry.value)
        return self._check(document, names)

    def matchtask(self, document: Document, task: Task) -> List[MatchError]:
        names = list(_vars_keys(task.mapping))

        register = task.mapping.get('register')
        if register is not None and isinstance(register.value, Scalar):
            names.append(register.value)

        if task.module_name in SET_FACT_MODULES and isinstance(task.module.value, Mapping):
            names.extend(
                fact.key for fact in task.module.value.entries
                if fact.key.value != 'cacheable')

        loop_control = task.mapping.get('loop_control')
        if loop_control is not None and isinstance(loop_control.value, Mapping):
            for key in ('loop_var', 'index_var'):
                entry = loop_control.value.get(key)
                if entry is not None and isinstance(entry.value, Scalar):
                    names.append(entry.value)
        return self._check(document, names)

    def _check(self, document: Document, names: List[Scalar]) -> List[MatchError]:
        matches = []
        for scalar in names:
            name = scalar.value
            if not name or '{{' in name or is_snake_case(name):
                continue
            matches.append(self.match_at(
                document, scalar,
                f"Variable '{name}' is {identifier_case(name)}, "
                f"use snake_case such as '{to_snake_case(name)}'"))
        return matches
