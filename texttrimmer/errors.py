"""Exceptions raised by texttrimmer."""


class TextTrimmerError(Exception):
    """Base class for all texttrimmer errors."""


class InvalidInputError(TextTrimmerError, TypeError):
    """The text argument is not a string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Input must be a string, got {type(value).__name__}")


class InvalidOptionError(TextTrimmerError, ValueError):
    """A numeric limit option is present but not a positive number."""

    def __init__(self, option: str, value: object):
        self.option = option
        self.value = value
        super().__init__(f"{option} must be a positive number, got {value!r}")


class ConfigError(TextTrimmerError):
    """Configuration file could not be loaded."""
