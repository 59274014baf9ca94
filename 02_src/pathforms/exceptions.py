"""Error types raised by the word/graph engine."""


class PathFormsError(Exception):
    """Base class for engine errors."""


class WordSyntaxError(PathFormsError, ValueError):
    """Textual word contains a token outside a, a-, b, b-."""


class InvalidSelectionError(PathFormsError, ValueError):
    """Caller passed a missing, out-of-range or duplicate word index."""


class UnknownNodeError(PathFormsError, KeyError):
    """Node id is not part of the built graph."""


class ConfigError(PathFormsError):
    """Engine configuration value is missing or malformed."""


class PipelineError(PathFormsError):
    """Report phases are misconfigured or returned a malformed context."""
