from pathlib import Path

from pedagogy.analysis.models import DocumentMetadata
from pedagogy.config.settings import Settings
from pedagogy.ingest.file_loader import FileLoader
from pedagogy.logging.logger import Log
from pedagogy.processor.processor import build_processor
from pedagogy.worker.batch_runner import BatchReport, BatchRunner
from pedagogy.worker.result_writer import ResultWriter

DEMO_TITLE = "Démonstration - Les Fractions"
DEMO_STEM = "demo-fractions"
DEMO_CONTENT = """# Les Fractions en CM1

## Qu'est-ce qu'une fraction ?

Une fraction représente une partie d'un tout. Elle s'écrit avec deux nombres :
- Le numérateur (en haut) : nombre de parties prises
- Le dénominateur (en bas) : nombre total de parties

## Exemple

3/4 signifie 3 parties sur 4.

## Exercice

Colorier 2/3 d'un rectangle.
"""


def run(settings: Settings) -> BatchReport:
    file_loader = FileLoader(settings)
    runner = BatchRunner(
        build_processor(settings),
        file_loader,
        ResultWriter(Path(settings.output_dir)),
    )
    if not settings.input_path:
        metadata = DocumentMetadata(title=settings.document_title or DEMO_TITLE)
        return runner.run_text(DEMO_CONTENT, metadata, stem=DEMO_STEM)

    input_path = Path(settings.input_path)
    paths = file_loader.discover(input_path) if input_path.is_dir() else [input_path]
    return runner.run(paths, title=settings.document_title or None)


def main() -> None:
    """Entry point: load settings -> build the pipeline -> transform the input."""
    settings = Settings()
    Log.configure(settings.log_level)
    report = run(settings)
    if not report.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
