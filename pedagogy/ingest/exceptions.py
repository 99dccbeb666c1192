class IngestError(Exception):
    """Base exception for document ingestion errors."""


class UnsupportedFileTypeError(IngestError):
    """Raised when no extractor handles a file's MIME type."""


class ExtractionError(IngestError):
    """Raised when text extraction fails."""


class InputNotFoundError(IngestError):
    """Raised when an input file or directory does not exist."""
