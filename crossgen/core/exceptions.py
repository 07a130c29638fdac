"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(CrosswordError):
    """Raised when the caller supplies an unusable grid size or word bank."""


class WordBankLoadError(CrosswordError):
    """Raised when a words file cannot be read."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""


class SearchTimeout(CrosswordError):
    """Raised inside the search once the configured deadline has passed."""
