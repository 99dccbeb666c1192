from pedagogy.analysis.base import BaseDocumentAnalyzer
from pedagogy.export.configurator import PDFExportConfigurator
from pedagogy.generation.base import BaseDocumentGenerator
from pedagogy.guide.builder import UsageGuideBuilder
from pedagogy.logging.logger import Log
from pedagogy.processor.events import PipelineListener, SafeListener
from pedagogy.processor.pipeline import PipelineContext, PipelineStep
from pedagogy.resources.resolver import ResourceResolver
from pedagogy.validation.validator import AccessibilityValidator


class AnalyzeDocumentStep(PipelineStep):
    started = (10, "Analyse du document...")
    finished = (25, "Document analysé")

    def __init__(self, analyzer: BaseDocumentAnalyzer, listener: PipelineListener) -> None:
        self._analyzer = analyzer
        self._listener = SafeListener(listener)

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._analyzer.analyze(context.text, context.metadata)
        self._listener.on_document_analyzed(context.analysis)
        return context


class ResolveResourcesStep(PipelineStep):
    started = (40, "Recherche de ressources...")
    finished = (55, "Ressources identifiées")

    def __init__(self, resolver: ResourceResolver) -> None:
        self._resolver = resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        context.resources = self._resolver.resolve(context.require_analysis())
        return context


class GenerateDocumentStep(PipelineStep):
    started = (70, "Génération du document accessible...")
    finished = (85, "Document généré")

    def __init__(self, generator: BaseDocumentGenerator, listener: PipelineListener) -> None:
        self._generator = generator
        self._listener = SafeListener(listener)

    def run(self, context: PipelineContext) -> PipelineContext:
        analysis = context.require_analysis()
        context.document = self._generator.generate(analysis, context.resources)
        self._listener.on_document_generated(analysis, context.document)
        return context


class ValidateAccessibilityStep(PipelineStep):
    started = (95, "Validation d'accessibilité...")

    def __init__(self, validator: AccessibilityValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.validation = self._validator.validate(context.require_document().html)
        return context


class BuildExportConfigStep(PipelineStep):
    def __init__(self, configurator: PDFExportConfigurator) -> None:
        self._configurator = configurator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.export_config = self._configurator.build(context.require_analysis())
        return context


class BuildUsageGuideStep(PipelineStep):
    finished = (100, "Transformation terminée !")

    def __init__(self, builder: UsageGuideBuilder) -> None:
        self._builder = builder

    def run(self, context: PipelineContext) -> PipelineContext:
        context.usage_guide = self._builder.build(context.require_analysis())
        return context


class ReportFailureStep(PipelineStep):
    def __init__(self, listener: PipelineListener) -> None:
        self._listener = SafeListener(listener)

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"Transformation failed: {context.error_message}")
        self._listener.on_failure(context.error_message)
        return context
