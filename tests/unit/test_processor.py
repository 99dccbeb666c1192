from unittest.mock import MagicMock

import pytest

from pedagogy.analysis.exceptions import AnalysisError
from pedagogy.export.configurator import PDFExportConfigurator
from pedagogy.generation.models import GeneratedDocument
from pedagogy.guide.builder import UsageGuideBuilder
from pedagogy.processor.events import PipelineListener
from pedagogy.processor.exceptions import PipelineStateError
from pedagogy.processor.pipeline import PipelineContext
from pedagogy.processor.processor import Processor
from pedagogy.processor.steps import (
    AnalyzeDocumentStep,
    BuildExportConfigStep,
    BuildUsageGuideStep,
    GenerateDocumentStep,
    ReportFailureStep,
    ResolveResourcesStep,
    ValidateAccessibilityStep,
)
from pedagogy.registry.models import CognitiveBreak, Discipline
from pedagogy.registry.registry import build_default_registry
from pedagogy.resources.resolver import ResourceResolver
from pedagogy.validation.validator import AccessibilityValidator
from tests.factories import make_analysis


def _make_pipeline() -> tuple[Processor, MagicMock, MagicMock, MagicMock, MagicMock]:
    analyzer = MagicMock()
    resolver = MagicMock(spec=ResourceResolver)
    generator = MagicMock()
    listener = MagicMock(spec=PipelineListener)

    analysis = make_analysis(Discipline.MATHEMATICS)
    document = GeneratedDocument(
        html='<main role="main"></main>',
        discipline=Discipline.MATHEMATICS,
        cognitive_break=CognitiveBreak("mental-calculation", "Calcul mental"),
    )
    analyzer.analyze.return_value = analysis
    resolver.resolve.return_value = []
    generator.generate.return_value = document

    steps = [
        AnalyzeDocumentStep(analyzer, listener),
        ResolveResourcesStep(resolver),
        GenerateDocumentStep(generator, listener),
        ValidateAccessibilityStep(AccessibilityValidator()),
        BuildExportConfigStep(PDFExportConfigurator()),
        BuildUsageGuideStep(UsageGuideBuilder(build_default_registry())),
    ]
    processor = Processor(steps=steps, failed_step=ReportFailureStep(listener), listener=listener)
    return processor, analyzer, resolver, generator, listener


class TestProcessorPipeline:
    def test_runs_all_stages_in_order(self) -> None:
        processor, analyzer, resolver, generator, listener = _make_pipeline()

        result = processor.process("Une fraction", {"title": "Fractions"})

        analyzer.analyze.assert_called_once()
        text, metadata = analyzer.analyze.call_args.args
        assert text == "Une fraction"
        assert metadata.title == "Fractions"
        resolver.resolve.assert_called_once_with(analyzer.analyze.return_value)
        generator.generate.assert_called_once_with(analyzer.analyze.return_value, [])
        assert result.validation.screen_reader_compatible is True
        assert result.export_config.metadata.subject == "mathematics"
        listener.on_failure.assert_not_called()

    def test_reports_progress_steps(self) -> None:
        processor, *_rest, listener = _make_pipeline()

        processor.process("Une fraction")

        percentages = [c.args[0] for c in listener.on_progress.call_args_list]
        assert percentages == [10, 25, 40, 55, 70, 85, 95, 100]
        assert listener.on_progress.call_args_list[-1].args[1] == "Transformation terminée !"

    def test_notifies_analysis_and_generation(self) -> None:
        processor, analyzer, _resolver, generator, listener = _make_pipeline()

        processor.process("Une fraction")

        listener.on_document_analyzed.assert_called_once_with(analyzer.analyze.return_value)
        listener.on_document_generated.assert_called_once_with(
            analyzer.analyze.return_value, generator.generate.return_value
        )

    def test_failing_listener_does_not_abort(self) -> None:
        processor, *_rest, listener = _make_pipeline()
        listener.on_document_analyzed.side_effect = RuntimeError("ui gone")
        listener.on_progress.side_effect = RuntimeError("ui gone")

        result = processor.process("Une fraction")

        assert result.usage_guide is not None

    def test_reports_failure_and_reraises(self) -> None:
        processor, analyzer, resolver, generator, listener = _make_pipeline()
        analyzer.analyze.side_effect = AnalysisError("bad text")

        with pytest.raises(AnalysisError, match="bad text"):
            processor.process("Une fraction")

        listener.on_failure.assert_called_once_with("bad text")
        resolver.resolve.assert_not_called()
        generator.generate.assert_not_called()

    def test_missing_stage_output_is_a_state_error(self) -> None:
        listener = MagicMock(spec=PipelineListener)
        processor = Processor(steps=[], failed_step=ReportFailureStep(listener), listener=listener)

        with pytest.raises(PipelineStateError):
            processor.process("Une fraction")
        listener.on_failure.assert_called_once()


class TestStepPreconditions:
    def test_generation_requires_analysis(self) -> None:
        step = GenerateDocumentStep(MagicMock(), PipelineListener())
        with pytest.raises(PipelineStateError, match="analysis"):
            step.run(PipelineContext(text="x"))

    def test_validation_requires_document(self) -> None:
        step = ValidateAccessibilityStep(AccessibilityValidator())
        with pytest.raises(PipelineStateError, match="document"):
            step.run(PipelineContext(text="x"))
