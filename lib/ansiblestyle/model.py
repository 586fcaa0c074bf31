"""Lossless structural model of a YAML document.

Standard YAML loaders drop the details a style checker needs: which quote
character a scalar used, how many spaces surround a colon, where the blank
lines and comments sit. Every node here keeps its source span and its raw
text, so rules can inspect the layout and the emitter can rebuild the file.

All classes are frozen and hold tuples. A Document is never modified after
the parser returns it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Mark:
    """A 1-based position in the source."""

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """A source range, 1-based, with an exclusive end column."""

    line: int
    column: int
    end_line: int
    end_column: int

    @property
    def start(self) -> Mark:
        return Mark(self.line, self.column)

    @property
    def end(self) -> Mark:
        return Mark(self.end_line, self.end_column)

    @property
    def is_multiline(self) -> bool:
        return self.end_line > self.line


@dataclass(frozen=True)
class Token:
    """Raw text found at a position, such as a tag or anchor prefix."""

    text: str
    mark: Mark


class ScalarStyle(Enum):
    PLAIN = "plain"
    SINGLE = "single"
    DOUBLE = "double"
    FOLDED = "folded"
    LITERAL = "literal"


class Node:
    """Base class of every element of a Document."""

    span: Span

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column


@dataclass(frozen=True)
class Comment(Node):
    text: str
    span: Span


@dataclass(frozen=True)
class BlankLine(Node):
    span: Span


@dataclass(frozen=True)
class Marker(Node):
    """Document start or end marker, or a directive line."""

    text: str
    span: Span


Trivia = Union[Comment, BlankLine]


@dataclass(frozen=True)
class Scalar(Node):
    value: str
    style: ScalarStyle
    raw: str
    span: Span
    tag: Optional[str] = None
    anchor: Optional[str] = None
    properties: Optional[Token] = None

    @property
    def is_quoted(self) -> bool:
        return self.style in (ScalarStyle.SINGLE, ScalarStyle.DOUBLE)

    @property
    def is_block(self) -> bool:
        return self.style in (ScalarStyle.FOLDED, ScalarStyle.LITERAL)

    @property
    def is_null(self) -> bool:
        return self.style is ScalarStyle.PLAIN and self.raw == ""

    @property
    def is_alias(self) -> bool:
        return self.style is ScalarStyle.PLAIN and self.raw.startswith("*")


@dataclass(frozen=True)
class SequenceItem:
    node: "Content"
    dash: Optional[Mark] = None
    leading: Tuple[Trivia, ...] = ()
    comment: Optional[Comment] = None
    between: Tuple[Trivia, ...] = ()

    @property
    def blank_lines_before(self) -> int:
        return sum(1 for t in self.leading if isinstance(t, BlankLine))


@dataclass(frozen=True)
class Sequence(Node):
    items: Tuple[SequenceItem, ...]
    span: Span
    flow: bool = False
    raw: str = ""
    tag: Optional[str] = None
    anchor: Optional[str] = None
    properties: Optional[Token] = None

    def __iter__(self) -> Iterator["Content"]:
        return (item.node for item in self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class MappingEntry:
    key: Scalar
    value: "Content"
    colon: Mark
    space_before_colon: int = 0
    space_after_colon: Optional[int] = None
    index: int = 0
    leading: Tuple[Trivia, ...] = ()
    comment: Optional[Comment] = None
    between: Tuple[Trivia, ...] = ()

    @property
    def name(self) -> str:
        return self.key.value


@dataclass(frozen=True)
class Mapping(Node):
    entries: Tuple[MappingEntry, ...]
    span: Span
    flow: bool = False
    raw: str = ""
    tag: Optional[str] = None
    anchor: Optional[str] = None
    properties: Optional[Token] = None

    def keys(self) -> List[str]:
        return [entry.key.value for entry in self.entries]

    def get(self, key: str) -> Optional[MappingEntry]:
        for entry in self.entries:
            if entry.key.value == key:
                return entry
        return None

    def __contains__(self, key: object) -> bool:
        return any(entry.key.value == key for entry in self.entries)

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


Content = Union[Scalar, Sequence, Mapping]


@dataclass(frozen=True)
class Document:
    """Parsed file: top-level markers, trivia and content in source order."""

    nodes: Tuple[Node, ...]
    path: str = "<string>"
    text: str = field(default="", compare=False, repr=False)
    lines: Tuple[str, ...] = field(default=(), compare=False, repr=False)
    bom: bool = field(default=False, compare=False, repr=False)

    @property
    def root(self) -> Optional[Content]:
        for node in self.nodes:
            if isinstance(node, (Scalar, Sequence, Mapping)):
                return node
        return None

    @property
    def contents(self) -> List[Content]:
        return [n for n in self.nodes if isinstance(n, (Scalar, Sequence, Mapping))]

    @property
    def line_count(self) -> int:
        return len(self.lines)
