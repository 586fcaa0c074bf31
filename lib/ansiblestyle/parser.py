"""Lossless structural parser for the block YAML used by Ansible.

The parser works line by line for block structure and character by
character inside quoted scalars and flow collections. It understands the
YAML an Ansible playbook uses: block mappings and sequences (including
indentless sequences), plain, quoted and block scalars, flow collections,
comments, tags, anchors and aliases, and document markers.
"""
import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from ansiblestyle.constants import BOM
from ansiblestyle.errors import ParseError
from ansiblestyle.model import (
    BlankLine,
    Comment,
    Content,
    Document,
    Mapping,
    MappingEntry,
    Mark,
    Marker,
    Node,
    Scalar,
    ScalarStyle,
    Sequence,
    SequenceItem,
    Span,
    Token,
    Trivia,
)

_logger = logging.getLogger(__name__)

ESCAPES = {
    '0': '\0', 'a': '\x07', 'b': '\x08', 't': '\t', '\t': '\t', 'n': '\n',
    'v': '\x0b', 'f': '\x0c', 'r': '\r', 'e': '\x1b', ' ': ' ', '"': '"',
    '/': '/', '\\': '\\', 'N': '\x85', '_': '\xa0', 'L': '\u2028',
    'P': '\u2029',
}

ESCAPE_CODES = {'x': 2, 'u': 4, 'U': 8}

FLOW_INDICATORS = ',[]{}'

# Characters that cannot start a plain scalar
INDICATORS = '#&*!|>%@`\'"[]{},'


def parse(text: str, path: str = "<string>") -> Document:
    """Parse YAML text into a Document.

    Raises ParseError with the line and column where parsing stopped.
    """
    return Parser(text, path).parse()


class Parser(object):
    """Builds a Document from the lines of a YAML file."""

    def __init__(self, text: str, path: str = "<string>") -> None:
        self.path = path
        # positions are counted after a byte order mark
        self.bom = text.startswith(BOM)
        if self.bom:
            text = text[len(BOM):]
        self.text = text.replace('\r\n', '\n')
        lines = self.text.split('\n')
        if self.text.endswith('\n') or not self.text:
            lines.pop()
        self.lines = lines
        self.pos = 0

    # -- helpers -------------------------------------------------------------

    def _error(self, message: str, line: int, column: int) -> ParseError:
        return ParseError(message, line + 1, column + 1, self.path)

    def _indent(self, i: int) -> int:
        line = self.lines[i]
        return len(line) - len(line.lstrip(' '))

    def _is_blank(self, i: int) -> bool:
        return not self.lines[i].strip()

    def _is_comment(self, i: int) -> bool:
        return self.lines[i].lstrip(' \t').startswith('#')

    def _is_trivia(self, i: int) -> bool:
        return self._is_blank(i) or self._is_comment(i)

    def _is_marker(self, i: int) -> bool:
        line = self.lines[i]
        for marker in ('---', '...'):
            if line == marker or line.startswith(marker + ' ') or \
                    line.startswith(marker + '\t'):
                return True
        return line.startswith('%')

    def _at_end(self, i: int) -> bool:
        return i >= len(self.lines) or self._is_marker(i)

    def _is_dash(self, i: int, col: int) -> bool:
        line = self.lines[i]
        return col < len(line) and line[col] == '-' and (
            col + 1 == len(line) or line[col + 1] in ' \t')

    def _check_tabs(self, i: int) -> None:
        line = self.lines[i]
        stripped = line.lstrip(' \t')
        lead = line[:len(line) - len(stripped)]
        if '\t' in lead:
            raise self._error(
                "found character '\\t' that cannot start any token",
                i, lead.index('\t'))

    def _next_content(self, i: int) -> int:
        while i < len(self.lines) and self._is_trivia(i):
            i += 1
        return i

    def _collect_trivia(self) -> List[Trivia]:
        trivia: List[Trivia] = []
        while self.pos < len(self.lines) and self._is_trivia(self.pos):
            trivia.append(self._trivia(self.pos))
            self.pos += 1
        return trivia

    def _trivia_between(self, start: int, stop: int) -> Tuple[Trivia, ...]:
        return tuple(self._trivia(i) for i in range(start, stop))

    def _trivia(self, i: int) -> Trivia:
        if self._is_blank(i):
            return BlankLine(Span(i + 1, 1, i + 1, 1))
        line = self.lines[i].rstrip()
        col = len(line) - len(line.lstrip(' \t'))
        return Comment(line[col:], Span(i + 1, col + 1, i + 1, len(line) + 1))

    def _comment_at(self, i: int, col: int) -> Comment:
        line = self.lines[i].rstrip()
        return Comment(line[col:], Span(i + 1, col + 1, i + 1, len(line) + 1))

    def _trailing(self, i: int, col: int) -> Optional[Comment]:
        """Return the comment ending line i at or after col.

        Anything other than whitespace and a comment is an error.
        """
        line = self.lines[i]
        while col < len(line) and line[col] in ' \t':
            col += 1
        if col >= len(line):
            return None
        if line[col] == '#':
            return self._comment_at(i, col)
        raise self._error(
            "expected <block end>, but found %r" % line[col], i, col)

    def _slice(self, line: int, col: int, end_line: int, end_col: int) -> str:
        """Return the verbatim source between two 0-based positions."""
        if line == end_line:
            return self.lines[line][col:end_col]
        parts = [self.lines[line][col:]]
        parts.extend(self.lines[line + 1:end_line])
        parts.append(self.lines[end_line][:end_col])
        return '\n'.join(parts)

    def _null(self, i: int, col: int) -> Scalar:
        return Scalar('', ScalarStyle.PLAIN, '', Span(i + 1, col + 1, i + 1, col + 1))

    # -- document ------------------------------------------------------------

    def parse(self) -> Document:
        nodes: List[Node] = []
        has_content = False
        while self.pos < len(self.lines):
            i = self.pos
            if self._is_trivia(i):
                nodes.extend(self._collect_trivia())
                continue
            if self._is_marker(i):
                has_content = self._parse_marker(i, nodes, has_content)
                continue
            if has_content:
                raise self._error(
                    "expected '<document start>', but found more content",
                    i, self._indent(i))
            node, comment = self._parse_node_line(i, -1)
            nodes.append(node)
            if comment is not None:
                nodes.append(comment)
            has_content = True
        _logger.debug("Parsed %s into %d top-level nodes", self.path, len(nodes))
        return Document(
            tuple(nodes), path=self.path, text=self.text, lines=tuple(self.lines),
            bom=self.bom)

    def _parse_marker(self, i: int, nodes: List[Node], has_content: bool) -> bool:
        line = self.lines[i]
        self.pos = i + 1
        if line.startswith('%'):
            nodes.append(Marker(line.rstrip(), Span(i + 1, 1, i + 1, len(line.rstrip()) + 1)))
            return has_content
        text = line[:3]
        nodes.append(Marker(text, Span(i + 1, 1, i + 1, 4)))
        col = 3
        while col < len(line) and line[col] in ' \t':
            col += 1
        if col < len(line):
            if line[col] == '#':
                nodes.append(self._comment_at(i, col))
            elif text == '---':
                node, comment = self._parse_inline(i, col, -1, allow_block=False)
                nodes.append(node)
                if comment is not None:
                    nodes.append(comment)
                return True
            else:
                raise self._error(
                    "expected a comment or a line break, but found %r" % line[col],
                    i, col)
        # a start marker opens a new document, an end marker closes one
        return False

    # -- block structure -----------------------------------------------------

    def _parse_node_line(self, i: int, parent_indent: int) -> Tuple[Content, Optional[Comment]]:
        """Parse the node whose first token starts line i."""
        self._check_tabs(i)
        return self._parse_inline(i, self._indent(i), parent_indent, allow_block=True)

    def _parse_inline(
            self,
            i: int,
            col: int,
            parent_indent: int,
            allow_block: bool) -> Tuple[Content, Optional[Comment]]:
        """Parse a node starting at line i, column col.

        parent_indent is the indentation of the enclosing block; continuation
        lines must be indented deeper than it. allow_block tells whether a
        block mapping or sequence may start here (after '- ' or at the start
        of a line) as opposed to after 'key: '.
        """
        line = self.lines[i]
        props, tag, anchor, col = self._parse_properties(i, col)
        if props is not None:
            rest = line[col:]
            if not rest or rest.startswith('#'):
                comment = self._comment_at(i, col) if rest else None
                j = self._next_content(i + 1)
                if not self._at_end(j) and self._indent(j) > parent_indent:
                    node, _ = self._parse_node_line(j, parent_indent)
                else:
                    node = self._null(i, col)
                    self.pos = i + 1
                return replace(node, tag=tag, anchor=anchor, properties=props), comment
            node, comment = self._parse_inline(i, col, parent_indent, allow_block)
            return replace(node, tag=tag, anchor=anchor, properties=props), comment

        char = line[col]
        if self._is_dash(i, col):
            if not allow_block:
                raise self._error("sequence entries are not allowed here", i, col)
            return self._parse_sequence(i, col), None
        if char == '?' and (col + 1 == len(line) or line[col + 1] in ' \t'):
            raise self._error("complex mapping keys are not supported", i, col)
        if allow_block and self._scan_key(i, col) is not None:
            return self._parse_mapping(i, col), None
        if char in '|>':
            return self._parse_block_scalar(i, col, parent_indent)
        if char in '[{':
            node, end_line, end_col = self._parse_flow(i, col)
            self.pos = end_line + 1
            return node, self._trailing(end_line, end_col)
        if char in '\'"':
            node, end_line, end_col = self._parse_quoted(i, col)
            self.pos = end_line + 1
            rest = self.lines[end_line][end_col:].lstrip(' \t')
            if rest.startswith(':'):
                raise self._error(
                    "mapping values are not allowed here",
                    end_line, len(self.lines[end_line]) - len(rest))
            return node, self._trailing(end_line, end_col)
        if char in '%@`':
            raise self._error(
                "found character %r that cannot start any token" % char, i, col)
        return self._parse_plain(i, col, parent_indent)

    def _parse_properties(
            self, i: int, col: int) -> Tuple[Optional[Token], Optional[str], Optional[str], int]:
        line = self.lines[i]
        tag = anchor = None
        start = col
        end = col
        while col < len(line) and line[col] in '!&':
            stop = col
            while stop < len(line) and line[stop] not in ' \t':
                stop += 1
            word = line[col:stop]
            if word.startswith('!'):
                tag = word
            else:
                anchor = word[1:]
            end = stop
            col = stop
            while col < len(line) and line[col] in ' \t':
                col += 1
        if end == start:
            return None, None, None, col
        return Token(line[start:end], Mark(i + 1, start + 1)), tag, anchor, col

    def _parse_sequence(self, i: int, indent: int) -> Sequence:
        items: List[SequenceItem] = []
        leading: List[Trivia] = []
        line_idx = i
        while True:
            self._check_tabs(line_idx)
            line = self.lines[line_idx]
            dash = Mark(line_idx + 1, indent + 1)
            col = indent + 1
            while col < len(line) and line[col] == ' ':
                col += 1
            rest = line[col:]
            comment = None
            between: Tuple[Trivia, ...] = ()
            if not rest or rest.startswith('#'):
                if rest:
                    comment = self._comment_at(line_idx, col)
                j = self._next_content(line_idx + 1)
                if not self._at_end(j) and self._indent(j) > indent:
                    between = self._trivia_between(line_idx + 1, j)
                    node, _ = self._parse_node_line(j, indent)
                else:
                    node = self._null(line_idx, indent + 1)
                    self.pos = line_idx + 1
            else:
                if line[col] == '\t':
                    raise self._error(
                        "found character '\\t' that cannot start any token",
                        line_idx, col)
                node, comment = self._parse_inline(line_idx, col, indent, allow_block=True)
            items.append(SequenceItem(node, dash, tuple(leading), comment, between))

            resume = self.pos
            trivia = self._collect_trivia()
            j = self.pos
            if self._at_end(j):
                self.pos = resume
                break
            self._check_tabs(j)
            next_indent = self._indent(j)
            if next_indent == indent and self._is_dash(j, indent):
                leading = trivia
                line_idx = j
                continue
            if next_indent > indent:
                raise self._error(
                    "bad indentation of a sequence entry", j, next_indent)
            self.pos = resume
            break
        last = items[-1]
        end = last.node.span
        return Sequence(
            tuple(items),
            Span(i + 1, indent + 1, end.end_line, end.end_column))

    def _parse_mapping(self, i: int, indent: int) -> Mapping:
        entries: List[MappingEntry] = []
        leading: List[Trivia] = []
        line_idx = i
        while True:
            found = self._scan_key(line_idx, indent)
            if found is None:
                line = self.lines[line_idx]
                raise self._error(
                    "could not find expected ':' while scanning a mapping key",
                    line_idx, min(indent, len(line)))
            key, colon_col, before = found
            line = self.lines[line_idx]
            col = colon_col + 1
            while col < len(line) and line[col] == ' ':
                col += 1
            rest = line[col:]
            comment = None
            between: Tuple[Trivia, ...] = ()
            space_after: Optional[int] = None
            if not rest or rest.startswith('#'):
                if rest:
                    comment = self._comment_at(line_idx, col)
                j = self._next_content(line_idx + 1)
                if not self._at_end(j) and self._indent(j) > indent:
                    between = self._trivia_between(line_idx + 1, j)
                    value, _ = self._parse_node_line(j, indent)
                elif not self._at_end(j) and self._indent(j) == indent and self._is_dash(j, indent):
                    between = self._trivia_between(line_idx + 1, j)
                    self._check_tabs(j)
                    value = self._parse_sequence(j, indent)
                else:
                    value = self._null(line_idx, colon_col + 1)
                    self.pos = line_idx + 1
            else:
                if line[col] == '\t':
                    raise self._error(
                        "found character '\\t' that cannot start any token",
                        line_idx, col)
                space_after = col - colon_col - 1
                value, comment = self._parse_inline(line_idx, col, indent, allow_block=False)
            entries.append(MappingEntry(
                key=key,
                value=value,
                colon=Mark(line_idx + 1, colon_col + 1),
                space_before_colon=before,
                space_after_colon=space_after,
                index=len(entries),
                leading=tuple(leading),
                comment=comment,
                between=between,
            ))

            resume = self.pos
            trivia = self._collect_trivia()
            j = self.pos
            if self._at_end(j):
                self.pos = resume
                break
            self._check_tabs(j)
            next_indent = self._indent(j)
            if next_indent == indent and not self._is_dash(j, indent):
                leading = trivia
                line_idx = j
                continue
            if next_indent > indent:
                raise self._error(
                    "bad indentation of a mapping entry", j, next_indent)
            self.pos = resume
            break
        end = entries[-1].value.span
        return Mapping(
            tuple(entries),
            Span(i + 1, indent + 1, end.end_line, end.end_column))

    def _scan_key(self, i: int, col: int) -> Optional[Tuple[Scalar, int, int]]:
        """Recognise a block mapping key at line i, column col.

        Returns the key scalar, the column of its colon and the number of
        spaces between the key and the colon.
        """
        line = self.lines[i]
        if col >= len(line):
            return None
        char = line[col]
        if char in '\'"':
            end = self._scan_quoted_line(line, col)
            if end is None:
                return None
            k = end
            while k < len(line) and line[k] == ' ':
                k += 1
            if k < len(line) and line[k] == ':' and (
                    k + 1 == len(line) or line[k + 1] in ' \t'):
                raw = line[col:end]
                value = self._quoted_value(raw, i, col)
                style = ScalarStyle.SINGLE if char == "'" else ScalarStyle.DOUBLE
                key = Scalar(value, style, raw, Span(i + 1, col + 1, i + 1, end + 1))
                return key, k, k - end
            return None
        if char in INDICATORS:
            return None
        if char in '-?:' and (col + 1 == len(line) or line[col + 1] in ' \t'):
            return None
        k = col
        while k < len(line):
            if line[k] == '#' and k > col and line[k - 1] in ' \t':
                return None
            if line[k] == ':' and (k + 1 == len(line) or line[k + 1] in ' \t'):
                text = line[col:k]
                stripped = text.rstrip(' ')
                if not stripped:
                    return None
                key = Scalar(
                    stripped, ScalarStyle.PLAIN, stripped,
                    Span(i + 1, col + 1, i + 1, col + len(stripped) + 1))
                return key, k, len(text) - len(stripped)
            k += 1
        return None

    # -- scalars -------------------------------------------------------------

    def _parse_plain(
            self, i: int, col: int, parent_indent: int) -> Tuple[Scalar, Optional[Comment]]:
        line = self.lines[i]
        if line[col] == '*':
            stop = col
            while stop < len(line) and line[stop] not in ' \t,[]{}':
                stop += 1
            raw = line[col:stop]
            self.pos = i + 1
            return (
                Scalar(raw, ScalarStyle.PLAIN, raw, Span(i + 1, col + 1, i + 1, stop + 1)),
                self._trailing(i, stop))
        text, comment_col = self._plain_segment(i, col)
        self._check_plain_segment(i, col, text)
        parts = [text]
        breaks = [0]
        end_line, end_col = i, col + len(text)
        comment = self._comment_at(i, comment_col) if comment_col is not None else None
        j = i + 1
        while comment is None:
            blanks = 0
            while j < len(self.lines) and self._is_blank(j):
                blanks += 1
                j += 1
            if self._at_end(j) or self._is_comment(j):
                break
            indent = self._indent(j)
            if indent <= parent_indent:
                break
            segment, comment_col = self._plain_segment(j, indent)
            self._check_plain_segment(j, indent, segment)
            parts.append(segment)
            breaks.append(blanks)
            end_line, end_col = j, indent + len(segment)
            if comment_col is not None:
                comment = self._comment_at(j, comment_col)
            j += 1
        value = parts[0]
        for part, blanks in zip(parts[1:], breaks[1:]):
            value += ('\n' * blanks if blanks else ' ') + part
        self.pos = end_line + 1
        raw = self._slice(i, col, end_line, end_col)
        return (
            Scalar(value, ScalarStyle.PLAIN, raw, Span(i + 1, col + 1, end_line + 1, end_col + 1)),
            comment)

    def _plain_segment(self, i: int, col: int) -> Tuple[str, Optional[int]]:
        """Return the plain text starting at col and the column of a trailing comment."""
        line = self.lines[i]
        k = col
        while k < len(line):
            if line[k] == '#' and k > col and line[k - 1] in ' \t':
                return line[col:k].rstrip(' \t'), k
            k += 1
        return line[col:].rstrip(' \t'), None

    def _check_plain_segment(self, i: int, col: int, text: str) -> None:
        pos = text.find(': ')
        if pos < 0 and text.endswith(':'):
            pos = len(text) - 1
        if pos < 0:
            pos = text.find(':\t')
        if pos >= 0:
            raise self._error("mapping values are not allowed here", i, col + pos)

    @staticmethod
    def _scan_quoted_line(line: str, col: int) -> Optional[int]:
        """Return the column after the closing quote if it is on this line."""
        quote = line[col]
        k = col + 1
        while k < len(line):
            char = line[k]
            if quote == "'" and char == "'":
                if k + 1 < len(line) and line[k + 1] == "'":
                    k += 2
                    continue
                return k + 1
            if quote == '"':
                if char == '\\':
                    k += 2
                    continue
                if char == '"':
                    return k + 1
            k += 1
        return None

    def _parse_quoted(self, i: int, col: int) -> Tuple[Scalar, int, int]:
        """Parse a quoted scalar that may span lines.

        Returns the scalar and the 0-based position after the closing quote.
        """
        quote = self.lines[i][col]
        line_idx = i
        k = col + 1
        while True:
            line = self.lines[line_idx]
            while k < len(line):
                char = line[k]
                if quote == "'" and char == "'":
                    if k + 1 < len(line) and line[k + 1] == "'":
                        k += 2
                        continue
                    end = k + 1
                    raw = self._slice(i, col, line_idx, end)
                    style = ScalarStyle.SINGLE
                    return (
                        Scalar(self._quoted_value(raw, i, col), style, raw,
                               Span(i + 1, col + 1, line_idx + 1, end + 1)),
                        line_idx, end)
                if quote == '"':
                    if char == '\\':
                        if k + 1 < len(line):
                            code = line[k + 1]
                            if code not in ESCAPES and code not in ESCAPE_CODES:
                                raise self._error(
                                    "found unknown escape character %r" % code,
                                    line_idx, k + 1)
                        k += 2
                        continue
                    if char == '"':
                        end = k + 1
                        raw = self._slice(i, col, line_idx, end)
                        style = ScalarStyle.DOUBLE
                        return (
                            Scalar(self._quoted_value(raw, i, col), style, raw,
                                   Span(i + 1, col + 1, line_idx + 1, end + 1)),
                            line_idx, end)
                k += 1
            line_idx += 1
            k = 0
            if self._at_end(line_idx):
                raise self._error(
                    "found unexpected end of stream while scanning a quoted scalar",
                    i, col)

    def _quoted_value(self, raw: str, i: int, col: int) -> str:
        """Fold line breaks and resolve escapes of a quoted scalar's raw text."""
        quote = raw[0]
        body = raw[1:-1]
        lines = body.split('\n')
        folded = lines[0]
        pending = 0
        for index, segment in enumerate(lines[1:], start=1):
            last = index == len(lines) - 1
            text = segment if last else segment.strip(' \t')
            text = text.lstrip(' \t')
            if not text and not last:
                pending += 1
                continue
            escaped_break = quote == '"' and _ends_with_escape(folded)
            if escaped_break:
                folded = folded[:-1]
            else:
                folded = folded.rstrip(' \t')
            if pending:
                folded += '\n' * pending
            elif not escaped_break:
                folded += ' '
            folded += text
            pending = 0
        if pending:
            folded = folded.rstrip(' \t') + '\n' * pending
        if quote == "'":
            return folded.replace("''", "'")
        return self._unescape(folded, i, col)

    def _unescape(self, text: str, i: int, col: int) -> str:
        out = []
        k = 0
        while k < len(text):
            char = text[k]
            if char != '\\':
                out.append(char)
                k += 1
                continue
            code = text[k + 1] if k + 1 < len(text) else ''
            if code in ESCAPES:
                out.append(ESCAPES[code])
                k += 2
            elif code in ESCAPE_CODES:
                width = ESCAPE_CODES[code]
                digits = text[k + 2:k + 2 + width]
                try:
                    out.append(chr(int(digits, 16)))
                except ValueError:
                    raise self._error(
                        "expected escape sequence of %d hexadecimal numbers" % width,
                        i, col)
                k += 2 + width
            else:
                raise self._error("found unknown escape character %r" % code, i, col)
        return ''.join(out)

    def _parse_block_scalar(
            self, i: int, col: int, parent_indent: int) -> Tuple[Scalar, Optional[Comment]]:
        line = self.lines[i]
        style = ScalarStyle.LITERAL if line[col] == '|' else ScalarStyle.FOLDED
        k = col + 1
        chomping = 'clip'
        explicit = None
        while k < len(line) and line[k] in '+-123456789':
            if line[k] == '+':
                chomping = 'keep'
            elif line[k] == '-':
                chomping = 'strip'
            else:
                explicit = int(line[k])
            k += 1
        header_end = k
        if k < len(line) and line[k] not in ' \t':
            raise self._error(
                "expected chomping or indentation indicators, but found %r" % line[k],
                i, k)
        comment = self._trailing(i, k)

        base = max(parent_indent, 0)
        content_indent = base + explicit if explicit else None
        j = i + 1
        last = i
        while j < len(self.lines):
            current = self.lines[j]
            if not current.strip():
                j += 1
                continue
            indent = self._indent(j)
            if content_indent is None:
                if indent <= parent_indent:
                    break
                content_indent = indent
            if indent < content_indent or (indent == 0 and self._is_marker(j)):
                break
            last = j
            j += 1
        trailing_blanks = 0
        if chomping == 'keep':
            ahead = last + 1
            while ahead < len(self.lines) and self._is_blank(ahead):
                trailing_blanks += 1
                ahead += 1
        body = self.lines[i + 1:last + 1]
        content = [b[content_indent:] if content_indent is not None else '' for b in body]
        if style is ScalarStyle.LITERAL:
            value = '\n'.join(content)
        else:
            value = _fold_block(content)
        if content and chomping != 'strip':
            value += '\n'
        if chomping == 'keep':
            value += '\n' * trailing_blanks
        self.pos = last + 1

        header = line[col:header_end]
        if body:
            raw = header + '\n' + '\n'.join(body)
            span = Span(i + 1, col + 1, last + 1, len(self.lines[last]) + 1)
        else:
            raw = header
            span = Span(i + 1, col + 1, i + 1, header_end + 1)
        return Scalar(value, style, raw, span), comment

    # -- flow collections ----------------------------------------------------

    def _parse_flow(self, i: int, col: int) -> Tuple[Content, int, int]:
        """Parse a flow collection starting at line i, column col.

        Returns the node and the 0-based position after its closing bracket.
        """
        node, (end_line, end_col) = self._flow_node(i, col)
        return node, end_line, end_col

    def _flow_skip(self, i: int, k: int, opener: Tuple[int, int]) -> Tuple[int, int]:
        """Skip whitespace, line breaks and comments inside a flow collection."""
        while True:
            if i >= len(self.lines) or (k == 0 and self._is_marker(i)):
                raise self._error(
                    "found unexpected end of stream while parsing a flow collection",
                    opener[0], opener[1])
            line = self.lines[i]
            while k < len(line) and line[k] in ' \t':
                k += 1
            if k >= len(line) or line[k] == '#':
                i += 1
                k = 0
                continue
            return i, k

    def _flow_node(self, i: int, k: int) -> Tuple[Content, Tuple[int, int]]:
        char = self.lines[i][k]
        if char == '[':
            return self._flow_sequence(i, k)
        if char == '{':
            return self._flow_mapping(i, k)
        if char in '\'"':
            node, end_line, end_col = self._parse_quoted(i, k)
            return node, (end_line, end_col)
        return self._flow_plain(i, k)

    def _flow_plain(self, i: int, k: int) -> Tuple[Scalar, Tuple[int, int]]:
        line = self.lines[i]
        start = k
        while k < len(line):
            char = line[k]
            if char in FLOW_INDICATORS:
                break
            if char == ':' and (k + 1 == len(line) or line[k + 1] in ' \t' + FLOW_INDICATORS):
                break
            if char == '#' and k > start and line[k - 1] in ' \t':
                break
            k += 1
        text = line[start:k].rstrip(' \t')
        if not text:
            raise self._error(
                "did not find expected node content", i, start)
        end = start + len(text)
        return (
            Scalar(text, ScalarStyle.PLAIN, text, Span(i + 1, start + 1, i + 1, end + 1)),
            (i, end))

    def _flow_sequence(self, i: int, k: int) -> Tuple[Sequence, Tuple[int, int]]:
        opener = (i, k)
        items: List[SequenceItem] = []
        li, lk = self._flow_skip(i, k + 1, opener)
        while self.lines[li][lk] != ']':
            node, (li, lk) = self._flow_node(li, lk)
            line = self.lines[li]
            spaces = 0
            while lk + spaces < len(line) and line[lk + spaces] == ' ':
                spaces += 1
            if lk + spaces < len(line) and line[lk + spaces] == ':' and isinstance(node, Scalar):
                node, (li, lk) = self._flow_pair(node, li, lk, spaces, opener, ']')
            items.append(SequenceItem(node))
            li, lk = self._flow_skip(li, lk, opener)
            char = self.lines[li][lk]
            if char == ',':
                li, lk = self._flow_skip(li, lk + 1, opener)
            elif char != ']':
                raise self._error(
                    "did not find expected ',' or ']'", li, lk)
        end = (li, lk + 1)
        raw = self._slice(i, k, li, lk + 1)
        return (
            Sequence(tuple(items), Span(i + 1, k + 1, li + 1, lk + 2), flow=True, raw=raw),
            end)

    def _flow_pair(
            self,
            key: Scalar,
            li: int,
            lk: int,
            spaces: int,
            opener: Tuple[int, int],
            closer: str) -> Tuple[Mapping, Tuple[int, int]]:
        """Parse ': value' after a key inside a flow collection."""
        colon = lk + spaces
        line = self.lines[li]
        after = colon + 1
        while after < len(line) and line[after] == ' ':
            after += 1
        vi, vk = self._flow_skip(li, colon + 1, opener)
        if self.lines[vi][vk] in ',' + closer:
            value: Content = self._null(li, colon + 1)
            space_after = None
            end = (li, colon + 1)
        else:
            value, end = self._flow_node(vi, vk)
            space_after = after - colon - 1 if vi == li else None
        entry = MappingEntry(
            key=key,
            value=value,
            colon=Mark(li + 1, colon + 1),
            space_before_colon=spaces,
            space_after_colon=space_after,
        )
        span = Span(key.span.line, key.span.column, value.span.end_line, value.span.end_column)
        raw = self._slice(key.span.line - 1, key.span.column - 1, end[0], end[1])
        return Mapping((entry,), span, flow=True, raw=raw), end

    def _flow_mapping(self, i: int, k: int) -> Tuple[Mapping, Tuple[int, int]]:
        opener = (i, k)
        entries: List[MappingEntry] = []
        li, lk = self._flow_skip(i, k + 1, opener)
        while self.lines[li][lk] != '}':
            key, (li, lk) = self._flow_node(li, lk)
            if not isinstance(key, Scalar):
                raise self._error("flow collections cannot be mapping keys", li, lk)
            line = self.lines[li]
            spaces = 0
            while lk + spaces < len(line) and line[lk + spaces] == ' ':
                spaces += 1
            if lk + spaces < len(line) and line[lk + spaces] == ':':
                pair, (li, lk) = self._flow_pair(key, li, lk, spaces, opener, '}')
                entry = replace(pair.entries[0], index=len(entries))
            else:
                entry = MappingEntry(
                    key=key,
                    value=self._null(li, lk),
                    colon=Mark(li + 1, lk + 1),
                    index=len(entries),
                )
            entries.append(entry)
            li, lk = self._flow_skip(li, lk, opener)
            char = self.lines[li][lk]
            if char == ',':
                li, lk = self._flow_skip(li, lk + 1, opener)
            elif char != '}':
                raise self._error("did not find expected ',' or '}'", li, lk)
        raw = self._slice(i, k, li, lk + 1)
        return (
            Mapping(tuple(entries), Span(i + 1, k + 1, li + 1, lk + 2), flow=True, raw=raw),
            (li, lk + 1))


def _ends_with_escape(text: str) -> bool:
    count = len(text) - len(text.rstrip('\\'))
    return count % 2 == 1


def _fold_block(lines: List[str]) -> str:
    """Fold the content lines of a '>' block scalar."""
    if not lines:
        return ''
    result = lines[0]
    for previous, current in zip(lines, lines[1:]):
        if not current:
            result += '\n'
        elif not previous:
            result += current
        elif current.startswith((' ', '\t')) or previous.startswith((' ', '\t')):
            result += '\n' + current
        else:
            result += ' ' + current
    return result
