import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from pedagogy.analysis.analyzer import DocumentAnalyzer
from pedagogy.registry.registry import DisciplineRegistry, build_default_registry
from tests.factories import FIXED_NOW


@pytest.fixture()
def registry() -> DisciplineRegistry:
    return build_default_registry()


@pytest.fixture()
def analyzer(registry: DisciplineRegistry) -> DocumentAnalyzer:
    return DocumentAnalyzer(registry, clock=lambda: FIXED_NOW)


@pytest.fixture()
def lesson_pdf_bytes() -> bytes:
    """Single-page PDF with a short lesson line."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Calculer la fraction 3/4 du nombre 12")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Page one lesson")
    c.showPage()
    c.drawString(72, 720, "Page two exercise")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a blank page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()
