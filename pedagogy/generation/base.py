from abc import ABC, abstractmethod
from collections.abc import Sequence

from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.generation.models import GeneratedDocument
from pedagogy.resources.models import ResourceSuggestion


class BaseDocumentGenerator(ABC):
    """Contract for accessible document generators."""

    @abstractmethod
    def generate(
        self,
        analysis: DocumentAnalysis,
        resources: Sequence[ResourceSuggestion] = (),
    ) -> GeneratedDocument:
        """Assemble an accessible document from an analysis.

        Raises:
            GenerationError: if the analysis is malformed or a template fails.
        """
