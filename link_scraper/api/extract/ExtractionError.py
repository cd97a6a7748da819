"""Base class of the errors that abort a whole extraction call."""


class ExtractionError(Exception):
    """Raised when a document cannot be extracted at all."""
