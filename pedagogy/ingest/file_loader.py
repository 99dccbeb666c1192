import mimetypes
from dataclasses import dataclass
from pathlib import Path

from pedagogy.analysis.models import DocumentMetadata
from pedagogy.config.settings import Settings
from pedagogy.ingest.exceptions import InputNotFoundError, UnsupportedFileTypeError
from pedagogy.ingest.factory import ExtractorFactory
from pedagogy.logging.logger import Log

# mimetypes does not know Markdown on every platform.
_EXTRA_TYPES = {".md": "text/markdown", ".markdown": "text/markdown"}


def guess_file_type(path: Path) -> str | None:
    suffix = path.suffix.lower()
    if suffix in _EXTRA_TYPES:
        return _EXTRA_TYPES[suffix]
    file_type, _encoding = mimetypes.guess_type(path.name)
    return file_type


@dataclass(frozen=True)
class LoadedDocument:
    text: str
    metadata: DocumentMetadata


class FileLoader:
    """Reads a lesson file from disk and extracts its text."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def load(self, path: Path, title: str | None = None) -> LoadedDocument:
        """Read and extract one file.

        Raises:
            InputNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if no extractor handles the file type.
            ExtractionError: if the content cannot be extracted.
        """
        if not path.is_file():
            raise InputNotFoundError(f"File not found: {path}")
        file_type = guess_file_type(path)
        if file_type is None:
            raise UnsupportedFileTypeError(f"Cannot determine the file type of {path}")

        extractor = ExtractorFactory.create(self._settings, file_type)
        raw_bytes = path.read_bytes()
        text = extractor.extract(raw_bytes)
        Log.info(f"Loaded {path.name}: {len(raw_bytes)} bytes, {len(text)} chars")
        return LoadedDocument(
            text=text,
            metadata=DocumentMetadata(
                file_name=path.name,
                file_type=file_type,
                file_size=len(raw_bytes),
                title=title or path.stem,
            ),
        )

    def discover(self, directory: Path) -> list[Path]:
        """Supported files directly inside `directory`, sorted by name."""
        if not directory.is_dir():
            raise InputNotFoundError(f"Directory not found: {directory}")
        supported = ExtractorFactory.supported_types()
        return sorted(
            p for p in directory.iterdir() if p.is_file() and guess_file_type(p) in supported
        )
