from pedagogy.config.settings import Settings
from pedagogy.ingest.base import BaseTextExtractor
from pedagogy.ingest.exceptions import UnsupportedFileTypeError
from pedagogy.ingest.pdfplumber_adapter import PdfPlumberAdapter
from pedagogy.ingest.plain_text_adapter import PlainTextAdapter
from pedagogy.ingest.pymupdf_adapter import PyMuPdfAdapter

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPES = ("text/plain", "text/markdown")


class ExtractorFactory:
    """Creates the text extractor for a MIME type; PDFs use the configured engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def supported_types(cls) -> tuple[str, ...]:
        return (*TEXT_MIME_TYPES, PDF_MIME_TYPE)

    @classmethod
    def create(cls, settings: Settings, file_type: str) -> BaseTextExtractor:
        if file_type in TEXT_MIME_TYPES:
            return PlainTextAdapter()
        if file_type != PDF_MIME_TYPE:
            raise UnsupportedFileTypeError(
                f"Unsupported file type '{file_type}'. Choose from: {list(cls.supported_types())}"
            )
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
