"""Text utils."""
import re

SNAKE_CASE_RE = re.compile(r"^[a-z_][a-z0-9_]*$")
SCREAMING_CASE_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")
PASCAL_CASE_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
CAMEL_CASE_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def is_snake_case(name: str) -> bool:
    """Tell whether a variable name is lowercase with underscores."""
    return bool(SNAKE_CASE_RE.match(name))


def identifier_case(name: str) -> str:
    """Name the case style an identifier is written in."""
    if is_snake_case(name):
        return "snake_case"
    if SCREAMING_CASE_RE.match(name):
        return "SCREAMING_CASE"
    if PASCAL_CASE_RE.match(name):
        return "PascalCase"
    if CAMEL_CASE_RE.match(name):
        return "camelCase"
    return "mixed case"


def to_snake_case(name: str) -> str:
    """Convert camelCase, PascalCase or SCREAMING_CASE to snake_case."""
    name = re.sub(r"[^A-Za-z0-9_]+", "_", name)
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


_NUMBER_RE = re.compile(
    r"^[-+]?("
    r"(\d[\d_]*)?\.?\d[\d_]*([eE][-+]?\d+)?"
    r"|0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+"
    r"|\.(inf|Inf|INF)|\.(nan|NaN|NAN)"
    r")$")
_LEADING_ZERO_RE = re.compile(r"^0\d+$")

# Indicators that cannot start a plain scalar
_PLAIN_INDICATORS = frozenset("-?:,[]{}#&*!|>'\"%@`")


def is_number(value: str) -> bool:
    """Tell whether a plain scalar would be read as an int or a float."""
    return bool(_NUMBER_RE.match(value))


def has_leading_zero(value: str) -> bool:
    """File modes such as 0644 keep their quotes to stay strings."""
    return bool(_LEADING_ZERO_RE.match(value))


def is_plain_safe(value: str) -> bool:
    """Tell whether value could be written without quotes and stay a string."""
    if not value or value != value.strip() or '\n' in value:
        return False
    if value[0] in _PLAIN_INDICATORS:
        return False
    if ': ' in value or ' #' in value or value.endswith(':'):
        return False
    return True
