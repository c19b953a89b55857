"""Text processing utilities — HTML stripping, word splitting, pattern escaping."""

import re

# Naive tag stripper: anything between angle brackets, not a real HTML parser
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s")
_SPECIAL_CHARS_RE = re.compile(r"[.*+?^${}()|\[\]\\]")


def strip_html(text: str) -> str:
    """Remove every <...> span from the text."""
    if not text:
        return text
    return _TAG_RE.sub("", text)


def split_words(text: str) -> list[str]:
    """Split on runs of whitespace, ignoring leading and trailing whitespace."""
    return text.split()


def last_whitespace_index(text: str) -> int:
    """Index of the last whitespace character in text, or -1 if there is none."""
    last = -1
    for match in _WHITESPACE_RE.finditer(text):
        last = match.start()
    return last


def escape_for_search(literal: str) -> str:
    """Escape regex metacharacters so the literal can be embedded in a pattern.

    Every character of ``. * + ? ^ $ { } ( ) | [ ] \\`` gets a backslash
    prefix; everything else passes through untouched.
    """
    return _SPECIAL_CHARS_RE.sub(lambda m: "\\" + m.group(0), literal)
