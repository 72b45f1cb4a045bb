"""Exceptions raised by the group_news pipeline stage."""


class GroupNewsError(ValueError):
    """Base class for grouping failures. A failed run produces no output."""


class ConfigurationError(GroupNewsError):
    """Invalid configuration, detected before any processing."""


class MalformedInputError(GroupNewsError):
    """Input is not a sequence of article records."""
