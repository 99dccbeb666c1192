from collections.abc import Mapping, Sequence

from pedagogy.analysis.analyzer import DocumentAnalyzer
from pedagogy.analysis.models import DocumentMetadata, metadata_from_mapping
from pedagogy.config.settings import Settings
from pedagogy.export.configurator import PDFExportConfigurator
from pedagogy.generation.dates import IcuDateFormatter
from pedagogy.generation.generator import AccessibleDocumentGenerator
from pedagogy.guide.builder import UsageGuideBuilder
from pedagogy.logging.logger import Log
from pedagogy.processor.events import LoggingListener, PipelineListener, SafeListener
from pedagogy.processor.exceptions import PipelineStateError
from pedagogy.processor.models import TransformationResult
from pedagogy.processor.pipeline import PipelineContext, PipelineStep
from pedagogy.processor.steps import (
    AnalyzeDocumentStep,
    BuildExportConfigStep,
    BuildUsageGuideStep,
    GenerateDocumentStep,
    ReportFailureStep,
    ResolveResourcesStep,
    ValidateAccessibilityStep,
)
from pedagogy.registry.registry import build_default_registry
from pedagogy.resources.resolver import ResourceResolver
from pedagogy.validation.validator import AccessibilityValidator


class Processor:
    """Runs the transformation pipeline for one document.

    Pipeline: analyze -> resolve resources -> generate -> validate -> export config
    -> usage guide.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep,
        listener: PipelineListener | None = None,
    ) -> None:
        self._steps = tuple(steps)
        self._failed_step = failed_step
        self._listener = SafeListener(listener or PipelineListener())

    def process(
        self,
        text: str,
        metadata: DocumentMetadata | Mapping[str, object] | None = None,
    ) -> TransformationResult:
        if metadata is None:
            metadata = DocumentMetadata()
        elif not isinstance(metadata, DocumentMetadata):
            metadata = metadata_from_mapping(metadata)
        context = PipelineContext(text=text, metadata=metadata)
        Log.info(f"Transforming document '{metadata.title or metadata.file_name or '-'}'")

        try:
            for step in self._steps:
                if step.started is not None:
                    self._listener.on_progress(*step.started)
                context = step.run(context)
                if step.finished is not None:
                    self._listener.on_progress(*step.finished)
            return self._result(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise

    @staticmethod
    def _result(context: PipelineContext) -> TransformationResult:
        missing = [
            name
            for name in ("analysis", "document", "validation", "export_config", "usage_guide")
            if getattr(context, name) is None
        ]
        if missing:
            raise PipelineStateError(f"Pipeline finished without: {', '.join(missing)}")
        return TransformationResult(
            analysis=context.analysis,
            resources=tuple(context.resources),
            document=context.document,
            validation=context.validation,
            export_config=context.export_config,
            usage_guide=context.usage_guide,
        )


def build_processor(
    settings: Settings,
    listener: PipelineListener | None = None,
) -> Processor:
    """Build a Processor with the default registry and all stages."""
    if listener is None:
        listener = LoggingListener()
    registry = build_default_registry()
    generator = AccessibleDocumentGenerator(
        registry,
        date_formatter=IcuDateFormatter(
            settings.date_locale, settings.date_pattern, settings.date_timezone
        ),
        seed=settings.mini_game_seed,
        language=settings.document_language,
        author=settings.export_creator,
    )
    configurator = PDFExportConfigurator(
        language=settings.document_language,
        creator=settings.export_creator,
        producer=settings.export_producer,
    )
    steps = [
        AnalyzeDocumentStep(DocumentAnalyzer(registry), listener),
        ResolveResourcesStep(ResourceResolver()),
        GenerateDocumentStep(generator, listener),
        ValidateAccessibilityStep(AccessibilityValidator()),
        BuildExportConfigStep(configurator),
        BuildUsageGuideStep(UsageGuideBuilder(registry)),
    ]
    return Processor(steps=steps, failed_step=ReportFailureStep(listener), listener=listener)
