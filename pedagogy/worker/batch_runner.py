from dataclasses import dataclass, field
from pathlib import Path

from pedagogy.analysis.models import DocumentMetadata
from pedagogy.ingest.file_loader import FileLoader
from pedagogy.logging.logger import Log
from pedagogy.processor.processor import Processor
from pedagogy.worker.result_writer import ResultWriter


@dataclass
class BatchReport:
    written: dict[str, list[Path]] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed


class BatchRunner:
    """Transform documents one by one; a failing document does not stop the batch."""

    def __init__(
        self,
        processor: Processor,
        file_loader: FileLoader,
        writer: ResultWriter,
    ) -> None:
        self._processor = processor
        self._file_loader = file_loader
        self._writer = writer

    def run(self, paths: list[Path], title: str | None = None) -> BatchReport:
        report = BatchReport()
        for path in paths:
            Log.info(f"Running {path.name}")
            try:
                loaded = self._file_loader.load(path, title=title)
                result = self._processor.process(loaded.text, loaded.metadata)
                report.written[path.name] = self._writer.write(path.stem, result)
            except Exception as exc:
                self._handle_failure(report, path.name, exc)
        self._log_summary(report)
        return report

    def run_text(self, text: str, metadata: DocumentMetadata, stem: str) -> BatchReport:
        report = BatchReport()
        try:
            result = self._processor.process(text, metadata)
            report.written[stem] = self._writer.write(stem, result)
        except Exception as exc:
            self._handle_failure(report, stem, exc)
        self._log_summary(report)
        return report

    @staticmethod
    def _handle_failure(report: BatchReport, name: str, exc: Exception) -> None:
        Log.error(f"Document {name} failed: {exc}")
        report.failed[name] = str(exc)

    @staticmethod
    def _log_summary(report: BatchReport) -> None:
        Log.info(f"Batch finished: {len(report.written)}/{report.total} documents transformed")
