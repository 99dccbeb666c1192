import io

import pdfplumber

from pedagogy.ingest.base import BaseTextExtractor
from pedagogy.ingest.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts lesson text from PDF using pdfplumber."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(raw_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
