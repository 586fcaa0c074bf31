"""Generic utility helpers: play and task classification, document walkers."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ansiblestyle.constants import (
    BLOCK_KEYS,
    BUILTIN_COLLECTIONS,
    INCLUDE_MODULES,
    LOOP_KEYS,
    PLAY_TASK_LISTS,
    TASK_KEYWORDS,
)
from ansiblestyle.model import (
    Content,
    Document,
    Mapping,
    MappingEntry,
    Scalar,
    Sequence,
    SequenceItem,
)

_logger = logging.getLogger(__name__)


class Kind(Enum):
    PLAY = "play"
    TASK = "task"
    BLOCK = "block"
    INCLUDE = "include"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Task:
    """A mapping recognised as a task, with its entries grouped by role."""

    mapping: Mapping
    kind: Kind
    name: Optional[MappingEntry] = None
    tags: Optional[MappingEntry] = None
    module: Optional[MappingEntry] = None
    args: Optional[MappingEntry] = None
    loops: Tuple[MappingEntry, ...] = ()
    options: Tuple[MappingEntry, ...] = ()
    item: Optional[SequenceItem] = None

    @property
    def action(self) -> str:
        """Return the module name as written, FQCN or not."""
        if self.module is None:
            return ""
        return self.module.key.value

    @property
    def module_name(self) -> str:
        """Return the module name without a builtin collection prefix."""
        return short_module_name(self.action)

    @property
    def line(self) -> int:
        return self.mapping.span.line


@dataclass(frozen=True)
class Play:
    mapping: Mapping
    kind: Kind
    item: Optional[SequenceItem] = None

    @property
    def line(self) -> int:
        return self.mapping.span.line


def short_module_name(name: str) -> str:
    for prefix in BUILTIN_COLLECTIONS:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def is_loop_key(key: str) -> bool:
    return key in LOOP_KEYS or key.startswith('with_')


def module_keys(mapping: Mapping) -> List[MappingEntry]:
    """Return entries that invoke a module rather than set a task keyword."""
    return [
        entry for entry in mapping.entries
        if entry.key.value not in TASK_KEYWORDS and not is_loop_key(entry.key.value)]


def classify(mapping: Mapping, context: str = "task") -> Kind:
    """Recognise what a mapping found in a play or task list stands for.

    context is "play" for items of a playbook and "task" for items of a
    task list.
    """
    keys = mapping.keys()
    if context == "play":
        if 'hosts' in keys:
            return Kind.PLAY
        if any(short_module_name(k) in ('import_playbook', 'include') for k in keys):
            return Kind.INCLUDE
        return Kind.UNKNOWN
    if any(k in BLOCK_KEYS for k in keys):
        return Kind.BLOCK
    modules = module_keys(mapping)
    if len(modules) == 1:
        if short_module_name(modules[0].key.value) in INCLUDE_MODULES:
            return Kind.INCLUDE
        return Kind.TASK
    if not modules and ('action' in keys or 'local_action' in keys):
        return Kind.TASK
    return Kind.UNKNOWN


def make_task(mapping: Mapping, item: Optional[SequenceItem] = None) -> Task:
    """Group the entries of a task mapping by the part they play."""
    kind = classify(mapping)
    name = tags = module = args = None
    loops: List[MappingEntry] = []
    options: List[MappingEntry] = []
    modules = module_keys(mapping)
    for entry in mapping.entries:
        key = entry.key.value
        if key == 'name':
            name = entry
        elif key == 'tags':
            tags = entry
        elif key == 'args':
            args = entry
        elif is_loop_key(key):
            loops.append(entry)
        elif kind is Kind.BLOCK and key in BLOCK_KEYS:
            if module is None:
                module = entry
        elif entry in modules and module is None:
            module = entry
        elif key in ('action', 'local_action') and not modules and module is None:
            module = entry
        else:
            options.append(entry)
    return Task(
        mapping=mapping,
        kind=kind,
        name=name,
        tags=tags,
        module=module,
        args=args,
        loops=tuple(loops),
        options=tuple(options),
        item=item,
    )


def _declares_play(node: Content) -> bool:
    if not isinstance(node, Mapping):
        return False
    keys = node.keys()
    return 'hosts' in keys or any(
        short_module_name(k) == 'import_playbook' for k in keys)


def _block_lists(document: Document) -> Iterator[Sequence]:
    for content in document.contents:
        if isinstance(content, Sequence) and not content.flow:
            yield content


def is_play_list(sequence: Sequence) -> bool:
    """Tell whether a list holds plays rather than tasks.

    A bare include only counts as a play in a list that declares a play
    with hosts or import_playbook.
    """
    return any(_declares_play(node) for node in sequence)


def is_playbook(document: Document) -> bool:
    """Tell whether any document of the file is a list of plays."""
    return any(is_play_list(sequence) for sequence in _block_lists(document))


def is_task_file(document: Document) -> bool:
    return any(
        not is_play_list(sequence) and any(isinstance(n, Mapping) for n in sequence)
        for sequence in _block_lists(document))


def iter_plays(document: Document) -> Iterator[Play]:
    """Yield every play and playbook include of a playbook."""
    for sequence in _block_lists(document):
        if not is_play_list(sequence):
            continue
        for item in sequence.items:
            if isinstance(item.node, Mapping):
                kind = classify(item.node, "play")
                if kind is not Kind.UNKNOWN:
                    yield Play(item.node, kind, item)


def iter_task_lists(document: Document) -> Iterator[Tuple[Optional[MappingEntry], Sequence]]:
    """Yield every list of tasks with the entry that holds it.

    The entry is None for the root list of a task file. Lists nested in
    block, rescue and always are included. Every document of a multi
    document file is walked.
    """
    for sequence in _block_lists(document):
        if not is_play_list(sequence):
            if any(isinstance(node, Mapping) for node in sequence):
                yield from _nested_task_lists(None, sequence)
            continue
        for item in sequence.items:
            if not isinstance(item.node, Mapping):
                continue
            if classify(item.node, "play") is not Kind.PLAY:
                continue
            for key in PLAY_TASK_LISTS:
                entry = item.node.get(key)
                if entry is not None and isinstance(entry.value, Sequence):
                    yield from _nested_task_lists(entry, entry.value)


def _nested_task_lists(
        owner: Optional[MappingEntry],
        tasks: Sequence) -> Iterator[Tuple[Optional[MappingEntry], Sequence]]:
    yield owner, tasks
    for node in tasks:
        if isinstance(node, Mapping) and classify(node) is Kind.BLOCK:
            for key in BLOCK_KEYS:
                entry = node.get(key)
                if entry is not None and isinstance(entry.value, Sequence):
                    yield from _nested_task_lists(entry, entry.value)


def iter_tasks(document: Document) -> Iterator[Task]:
    """Yield every task, block and include of the document in source order."""
    tasks = []
    for _, sequence in iter_task_lists(document):
        for item in sequence.items:
            if isinstance(item.node, Mapping):
                tasks.append(make_task(item.node, item))
    tasks.sort(key=lambda task: (task.mapping.span.line, task.mapping.span.column))
    yield from tasks


def iter_entries(node: Content) -> Iterator[MappingEntry]:
    """Yield every mapping entry below a node, depth first."""
    if isinstance(node, Mapping):
        for entry in node.entries:
            yield entry
            yield from iter_entries(entry.value)
    elif isinstance(node, Sequence):
        for child in node:
            yield from iter_entries(child)


def iter_scalars(
        node: Content,
        key: Optional[str] = None) -> Iterator[Tuple[Optional[str], Scalar]]:
    """Yield every value scalar below a node with the key it belongs to.

    Mapping keys are not yielded. Items of a sequence inherit the key that
    holds the sequence.
    """
    if isinstance(node, Scalar):
        yield key, node
    elif isinstance(node, Mapping):
        for entry in node.entries:
            yield from iter_scalars(entry.value, entry.key.value)
    elif isinstance(node, Sequence):
        for child in node:
            yield from iter_scalars(child, key)


def iter_out_of_order(
        entries: Iterable[MappingEntry],
        rank: Callable[[MappingEntry], Any]) -> Iterator[Tuple[MappingEntry, MappingEntry]]:
    """Yield entries ranked lower than an entry before them.

    Each entry is paired with the highest ranked entry that precedes it.
    """
    highest: Optional[MappingEntry] = None
    for entry in entries:
        if highest is not None and rank(entry) < rank(highest):
            yield entry, highest
        else:
            highest = entry


def iter_adjacent(document: Document) -> Iterator[Tuple[SequenceItem, Kind, SequenceItem, Kind]]:
    """Yield neighbouring plays and tasks with their kinds.

    Pairs are taken from the play list of a playbook and from every task
    list. Items that are not mappings break the chain.
    """
    lists: List[Tuple[Sequence, str]] = [
        (sequence, "play") for sequence in _block_lists(document)
        if is_play_list(sequence)]
    lists.extend((sequence, "task") for _, sequence in iter_task_lists(document))
    for sequence, context in lists:
        previous: Optional[Tuple[SequenceItem, Kind]] = None
        for item in sequence.items:
            if not isinstance(item.node, Mapping):
                previous = None
                continue
            kind = classify(item.node, context)
            if previous is not None:
                yield previous[0], previous[1], item, kind
            previous = (item, kind)
