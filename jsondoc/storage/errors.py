from pathlib import Path


class StoreError(Exception):
    """Base class for failures while reading or writing the document file."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ReadError(StoreError):
    """The data file could not be opened or read."""


class ParseError(StoreError):
    """Content is not a valid JSON object."""


class SerializeError(StoreError):
    """The document could not be encoded as JSON."""


class WriteError(StoreError):
    """The data file could not be written."""
