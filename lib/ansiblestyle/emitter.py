"""Turn a Document back into text."""
from typing import List

from ansiblestyle.constants import BOM
from ansiblestyle.model import (
    Comment,
    Content,
    Document,
    Mapping,
    Mark,
    Marker,
    Scalar,
    Sequence,
    Token,
)


class _Canvas(object):
    """Lines of text that pieces are written into at fixed positions."""

    def __init__(self, line_count: int) -> None:
        self.rows: List[str] = [''] * line_count

    def put(self, mark: Mark, text: str) -> None:
        line = mark.line
        column = mark.column
        for index, part in enumerate(text.split('\n')):
            if index:
                line += 1
                column = 1
            self._write(line, column, part)

    def _write(self, line: int, column: int, text: str) -> None:
        while len(self.rows) < line:
            self.rows.append('')
        row = self.rows[line - 1]
        if len(row) < column - 1:
            row += ' ' * (column - 1 - len(row))
        self.rows[line - 1] = row[:column - 1] + text + row[column - 1 + len(text):]


def emit(document: Document) -> str:
    """Serialize a Document, placing every token where it was parsed."""
    canvas = _Canvas(document.line_count)
    for node in document.nodes:
        if isinstance(node, (Comment, Marker)):
            canvas.put(node.span.start, node.text)
        elif isinstance(node, (Scalar, Sequence, Mapping)):
            _emit_content(canvas, node)
    text = '\n'.join(canvas.rows)
    if canvas.rows and document.text.endswith('\n'):
        text += '\n'
    if document.bom:
        text = BOM + text
    return text


def _emit_trivia(canvas: _Canvas, trivia) -> None:
    for node in trivia:
        if isinstance(node, Comment):
            canvas.put(node.span.start, node.text)


def _emit_content(canvas: _Canvas, node: Content) -> None:
    properties: Token = node.properties
    if properties is not None:
        canvas.put(properties.mark, properties.text)
    if isinstance(node, Scalar):
        if node.raw:
            canvas.put(node.span.start, node.raw)
        return
    if node.flow:
        canvas.put(node.span.start, node.raw)
        return
    if isinstance(node, Sequence):
        for item in node.items:
            _emit_trivia(canvas, item.leading)
            canvas.put(item.dash, '-')
            if item.comment is not None:
                canvas.put(item.comment.span.start, item.comment.text)
            _emit_trivia(canvas, item.between)
            _emit_content(canvas, item.node)
        return
    for entry in node.entries:
        _emit_trivia(canvas, entry.leading)
        _emit_content(canvas, entry.key)
        canvas.put(entry.colon, ':')
        if entry.comment is not None:
            canvas.put(entry.comment.span.start, entry.comment.text)
        _emit_trivia(canvas, entry.between)
        _emit_content(canvas, entry.value)
