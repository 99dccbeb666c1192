from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.generation.models import GeneratedDocument
from pedagogy.logging.logger import Log


class PipelineListener:
    """Notification port called by the processor and its steps.

    Every hook is a no-op; subclasses override what they need.
    """

    def on_progress(self, percentage: int, message: str) -> None:
        pass

    def on_document_analyzed(self, analysis: DocumentAnalysis) -> None:
        pass

    def on_document_generated(
        self, analysis: DocumentAnalysis, artifact: GeneratedDocument
    ) -> None:
        pass

    def on_failure(self, message: str) -> None:
        pass


class LoggingListener(PipelineListener):
    def on_progress(self, percentage: int, message: str) -> None:
        Log.info(f"[{percentage:3d}%] {message}")

    def on_document_analyzed(self, analysis: DocumentAnalysis) -> None:
        Log.debug(f"Document analyzed: {analysis.discipline} / {analysis.level}")

    def on_document_generated(
        self, analysis: DocumentAnalysis, artifact: GeneratedDocument
    ) -> None:
        Log.debug(f"Document generated: {artifact.size} chars for {analysis.discipline}")

    def on_failure(self, message: str) -> None:
        Log.error(f"Transformation failed: {message}")


class SafeListener(PipelineListener):
    """Forwards to another listener; its exceptions are logged, never raised."""

    def __init__(self, inner: PipelineListener) -> None:
        self._inner = inner

    def on_progress(self, percentage: int, message: str) -> None:
        self._call("on_progress", percentage, message)

    def on_document_analyzed(self, analysis: DocumentAnalysis) -> None:
        self._call("on_document_analyzed", analysis)

    def on_document_generated(
        self, analysis: DocumentAnalysis, artifact: GeneratedDocument
    ) -> None:
        self._call("on_document_generated", analysis, artifact)

    def on_failure(self, message: str) -> None:
        self._call("on_failure", message)

    def _call(self, hook: str, *args: object) -> None:
        try:
            getattr(self._inner, hook)(*args)
        except Exception as exc:
            Log.warning(f"Listener {type(self._inner).__name__}.{hook} failed: {exc}")
