from abc import ABC, abstractmethod
from collections.abc import Mapping

from pedagogy.analysis.models import DocumentAnalysis, DocumentMetadata


class BaseDocumentAnalyzer(ABC):
    """Contract for all document analyzers."""

    @abstractmethod
    def analyze(
        self,
        text: str,
        metadata: DocumentMetadata | Mapping[str, object] | None = None,
    ) -> DocumentAnalysis:
        """Classify a document and extract its pedagogical structure.

        Args:
            text: Raw document text.
            metadata: Opaque caller metadata (file name, type, size, title).

        Returns:
            DocumentAnalysis describing discipline, level, content type,
            objectives, vocabulary, visual needs, exercises and skills.

        Raises:
            AnalysisError: on an internal fault. Ambiguous classification
                never raises; it falls back to generic/default values.
        """
