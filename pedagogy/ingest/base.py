from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Extract plain text from a document's bytes.

        Args:
            raw_bytes: Raw file content.

        Returns:
            Extracted text as a single stripped string.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
