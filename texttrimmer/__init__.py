"""texttrimmer - trim text to a length or word count and highlight search terms."""

import logging

from texttrimmer.errors import ConfigError, InvalidInputError, InvalidOptionError, TextTrimmerError
from texttrimmer.highlighter import highlight
from texttrimmer.trimmer import trim
from texttrimmer.utils.text_processing import escape_for_search

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "InvalidInputError",
    "InvalidOptionError",
    "TextTrimmerError",
    "escape_for_search",
    "highlight",
    "trim",
]
