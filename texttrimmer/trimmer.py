"""Trim text to a maximum length or word count."""

import logging
import math

from texttrimmer.errors import InvalidInputError, InvalidOptionError
from texttrimmer.utils.text_processing import last_whitespace_index, split_words, strip_html as _strip_html

logger = logging.getLogger(__name__)

DEFAULT_ELLIPSIS = "..."


def _validate_limit(name: str, value: float | None) -> None:
    if value is None:
        return
    # bool is an int subclass; NaN fails the comparison
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
        raise InvalidOptionError(name, value)


def trim(
    text: str,
    max_length: float | None = None,
    max_words: float | None = None,
    ellipsis: str = DEFAULT_ELLIPSIS,
    respect_word_boundaries: bool = True,
    strip_html: bool = False,
) -> str:
    """Shorten text to max_length characters or max_words words.

    Lengths are counted in code points, as ``len()`` does. When both limits
    are given, max_words wins. The ellipsis is only appended when text was
    actually shortened, and counts towards max_length.

    HTML stripping happens only when a limit is set; with no limits the
    input comes back untouched even if strip_html is True.

    Raises:
        InvalidInputError: text is not a str.
        InvalidOptionError: a limit is present but not a positive number.
    """
    if not isinstance(text, str):
        raise InvalidInputError(text)
    _validate_limit("max_length", max_length)
    _validate_limit("max_words", max_words)

    if max_length is None and max_words is None:
        return text

    if ellipsis is None:
        ellipsis = DEFAULT_ELLIPSIS

    working = _strip_html(text) if strip_html else text

    if max_words is not None:
        return _trim_words(working, max_words, ellipsis)

    return _trim_length(working, max_length, ellipsis, respect_word_boundaries)


def _trim_words(text: str, max_words: float, ellipsis: str) -> str:
    words = split_words(text)
    if len(words) <= max_words:
        return text
    # An infinite limit always returns above, so floor is safe here
    keep = math.floor(max_words)
    logger.debug("Trimming %d words down to %d", len(words), keep)
    return " ".join(words[:keep]) + ellipsis


def _trim_length(text: str, max_length: float, ellipsis: str, respect_word_boundaries: bool) -> str:
    if len(text) <= max_length:
        return text

    # A marker as long as the limit leaves no room for any text
    cut = max(0, math.floor(max_length) - len(ellipsis))
    trimmed = text[:cut]

    if respect_word_boundaries:
        last_space = last_whitespace_index(trimmed)
        if last_space != -1:
            trimmed = trimmed[:last_space]

    logger.debug("Trimmed %d chars down to %d (+%d marker)", len(text), len(trimmed), len(ellipsis))
    return trimmed + ellipsis
