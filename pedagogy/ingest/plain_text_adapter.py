from pedagogy.ingest.base import BaseTextExtractor
from pedagogy.ingest.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Decodes UTF-8 text and Markdown files; a leading BOM is dropped."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            return raw_bytes.decode("utf-8-sig").strip()
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"text decoding failed: {exc}") from exc
