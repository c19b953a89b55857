"""Search-term highlighting."""

import logging
import re
from collections.abc import Iterable

from texttrimmer.errors import InvalidInputError
from texttrimmer.utils.text_processing import escape_for_search

logger = logging.getLogger(__name__)

DEFAULT_HIGHLIGHT_START = "<mark>"
DEFAULT_HIGHLIGHT_END = "</mark>"


def _normalize_terms(terms) -> list:
    if isinstance(terms, str):
        return [terms]
    if isinstance(terms, Iterable):
        return list(terms)
    return [terms]


def _build_pattern(term: str, case_sensitive: bool, whole_words: bool) -> re.Pattern:
    pattern = escape_for_search(term)
    if whole_words:
        pattern = rf"\b{pattern}\b"
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(pattern, flags)


def highlight(
    text: str,
    terms: str | Iterable[str] | None,
    highlight_start: str = DEFAULT_HIGHLIGHT_START,
    highlight_end: str = DEFAULT_HIGHLIGHT_END,
    case_sensitive: bool = False,
    whole_words: bool = False,
) -> str:
    """Wrap every occurrence of each term in highlight markers.

    Terms are applied one after another, each pass running over the output
    of the previous one. Markers inserted for an earlier term are therefore
    searched by later terms:

        >>> highlight("mark", ["mark", "mark"])
        '<<mark>mark</mark>><mark>mark</mark></<mark>mark</mark>>'

    Empty and non-string terms are skipped. A missing or empty term list
    returns text unchanged.

    Raises:
        InvalidInputError: text is not a str.
    """
    if not isinstance(text, str):
        raise InvalidInputError(text)
    if terms is None:
        return text

    if highlight_start is None:
        highlight_start = DEFAULT_HIGHLIGHT_START
    if highlight_end is None:
        highlight_end = DEFAULT_HIGHLIGHT_END

    result = text
    applied = 0
    for term in _normalize_terms(terms):
        if not isinstance(term, str) or not term:
            continue
        applied += 1
        pattern = _build_pattern(term, case_sensitive, whole_words)
        # Function replacement keeps backslashes in the markers literal
        result = pattern.sub(lambda m: f"{highlight_start}{m.group(0)}{highlight_end}", result)

    logger.debug("Highlighted %d term(s)", applied)
    return result
