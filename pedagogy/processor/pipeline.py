from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from pedagogy.analysis.models import DocumentAnalysis, DocumentMetadata
from pedagogy.export.models import ExportConfig
from pedagogy.generation.models import GeneratedDocument
from pedagogy.guide.models import UsageGuide
from pedagogy.processor.exceptions import PipelineStateError
from pedagogy.resources.models import ResourceSuggestion
from pedagogy.validation.models import ValidationResult


@dataclass(slots=True)
class PipelineContext:
    text: str
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    analysis: DocumentAnalysis | None = None
    resources: list[ResourceSuggestion] = field(default_factory=list)
    document: GeneratedDocument | None = None
    validation: ValidationResult | None = None
    export_config: ExportConfig | None = None
    usage_guide: UsageGuide | None = None
    error_message: str = ""

    def require_analysis(self) -> DocumentAnalysis:
        if self.analysis is None:
            raise PipelineStateError("PipelineContext.analysis must be set before this step")
        return self.analysis

    def require_document(self) -> GeneratedDocument:
        if self.document is None:
            raise PipelineStateError("PipelineContext.document must be set before this step")
        return self.document


class PipelineStep(ABC):
    # Progress reported around the step: (percentage, message), or None.
    started: ClassVar[tuple[int, str] | None] = None
    finished: ClassVar[tuple[int, str] | None] = None

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
