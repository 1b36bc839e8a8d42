"""Identifier helpers: case conversion and keyword-safe naming."""

from __future__ import annotations

from collections.abc import Iterator

_RAW_KEYWORDS = frozenset(
    {
        # 2015 strict keywords.
        "as", "break", "const", "continue", "else", "enum", "false", "fn",
        "for", "if", "impl", "in", "let", "loop", "match", "mod", "move",
        "mut", "pub", "ref", "return", "static", "struct", "trait", "true",
        "type", "unsafe", "use", "where", "while",
        # 2018 strict keywords.
        "dyn",
        # 2015 reserved keywords.
        "abstract", "become", "box", "do", "final", "macro", "override",
        "priv", "typeof", "unsized", "virtual", "yield",
        # 2018 reserved keywords.
        "async", "await", "try",
        # 2024 reserved keywords.
        "gen",
    }
)

# Keywords that cannot be written as raw identifiers; they get a trailing underscore.
_SUFFIXED_KEYWORDS = frozenset({"_", "super", "self", "Self", "extern", "crate"})


def sanitize_identifier(s: str) -> str:
    """Make an identifier safe to emit, escaping keywords and leading digits."""
    if s in _RAW_KEYWORDS:
        return f"r#{s}"
    if s in _SUFFIXED_KEYWORDS:
        return f"{s}_"
    if s and s[0].isnumeric():
        return f"_{s}"
    return s


def _split_words(s: str) -> Iterator[str]:
    """Split an identifier into words at separators and case boundaries."""
    current: list[str] = []
    for char in s + "\0":
        if char.isalnum():
            current.append(char)
            continue
        yield from _split_segment("".join(current))
        current = []


def _split_segment(word: str) -> Iterator[str]:
    if not word:
        return
    start = 0
    mode = None  # None marks a fresh word boundary
    for i, char in enumerate(word):
        if i + 1 == len(word):
            yield word[start:]
            return
        nxt = word[i + 1]
        if char.islower():
            next_mode = "lower"
        elif char.isupper():
            next_mode = "upper"
        else:
            next_mode = mode
        if next_mode == "lower" and nxt.isupper():
            yield word[start : i + 1]
            start = i + 1
            mode = None
        elif mode == "upper" and char.isupper() and nxt.islower():
            yield word[start:i]
            start = i
            mode = None
        else:
            mode = next_mode


def to_snake(s: str) -> str:
    """Convert a camelCase or SCREAMING_SNAKE_CASE name to lower_snake case."""
    return sanitize_identifier("_".join(word.lower() for word in _split_words(s)))


def to_upper_camel(s: str) -> str:
    """Convert a snake_case name to UpperCamel case."""
    return sanitize_identifier(
        "".join(word[0].upper() + word[1:].lower() for word in _split_words(s))
    )


def strip_enum_prefix(prefix: str, name: str) -> str:
    """Strip an enum's type name from the front of one of its value names.

    Both arguments are expected in UpperCamel case. The prefix is only removed
    when what remains starts with an uppercase letter.
    """
    stripped = name[len(prefix):] if name.startswith(prefix) else name
    if not (stripped and stripped[0].isupper()):
        stripped = name
    return sanitize_identifier(stripped)