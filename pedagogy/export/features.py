"""Discipline-specific PDF feature flags."""

from pedagogy.registry.models import Discipline

DISCIPLINE_FEATURES: dict[Discipline, dict[str, object]] = {
    Discipline.MATHEMATICS: {
        "formula_rendering": "high-quality-vector",
        "graphics_preservation": True,
        "calculator_embedding": "qr-code-link",
        "theorem_boxes": "bordered-highlighting",
    },
    Discipline.LITERATURE: {
        "typography_preservation": True,
        "annotation_support": True,
        "citation_formatting": "academic-standard",
        "glossary_links": "internal-navigation",
    },
    Discipline.SCIENCE: {
        "diagram_quality": "publication-ready",
        "data_table_formatting": True,
        "experimental_protocols": "step-by-step",
        "formula_rendering": "scientific-notation",
    },
    Discipline.HISTORY: {
        "timeline_preservation": True,
        "map_quality": "high-resolution",
        "date_formatting": "consistent-style",
        "source_references": "footnote-style",
    },
    Discipline.GEOGRAPHY: {
        "map_resolution": "cartographic-quality",
        "coordinate_system_preservation": True,
        "scale_indication": True,
        "layered_information": "toggleable-visibility",
    },
    Discipline.LANGUAGES: {
        "phonetic_symbol_support": True,
        "multilingual_text": "unicode-compliant",
        "pronunciation_guides": "ipa-standard",
        "cultural_context_images": "high-quality",
    },
    Discipline.ARTS: {
        "color_reproduction": "artist-grade",
        "image_resolution": "museum-quality",
        "style_analysis_layout": "academic-format",
        "comparison_views": "side-by-side",
    },
}

GENERIC_FEATURES: dict[str, object] = {
    "standard_formatting": True,
    "accessibility_compliance": "wcag-aa",
    "print_optimization": True,
}


def features_for(discipline: object) -> dict[str, object]:
    """Copy of the discipline's feature bag, generic when unknown."""
    return dict(DISCIPLINE_FEATURES.get(Discipline.from_key(discipline), GENERIC_FEATURES))
