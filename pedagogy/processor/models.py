from dataclasses import dataclass

from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.export.models import ExportConfig
from pedagogy.generation.models import GeneratedDocument
from pedagogy.guide.models import UsageGuide
from pedagogy.resources.models import ResourceSuggestion
from pedagogy.validation.models import ValidationResult


@dataclass(frozen=True)
class TransformationResult:
    """Everything one transformation produced."""

    analysis: DocumentAnalysis
    resources: tuple[ResourceSuggestion, ...]
    document: GeneratedDocument
    validation: ValidationResult
    export_config: ExportConfig
    usage_guide: UsageGuide
