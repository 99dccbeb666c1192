import pymupdf

from pedagogy.ingest.base import BaseTextExtractor
from pedagogy.ingest.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts lesson text from PDF using PyMuPDF."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=raw_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
