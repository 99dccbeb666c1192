from typing import ClassVar

from pedagogy.logging.logger import Log
from pedagogy.validation.models import ValidationResult

# Lower bounds of each grade, checked in order.
_GRADES: tuple[tuple[float, str], ...] = (
    (95, "Excellent (AAA)"),
    (85, "Très Bon (AA+)"),
    (75, "Bon (AA)"),
    (65, "Correct (A+)"),
    (50, "Acceptable (A)"),
)


def accessibility_grade(score: float) -> str:
    for lower_bound, grade in _GRADES:
        if score >= lower_bound:
            return grade
    return "À améliorer"


class AccessibilityValidator:
    """Presence checks for accessibility markers in a generated document.

    Each criterion is a plain substring test; nothing is parsed.
    """

    # criterion -> (markers, warning when none is present)
    _CRITERIA: ClassVar[dict[str, tuple[tuple[str, ...], str]]] = {
        "screen_reader_compatible": (
            ("role=",),
            "Aucun attribut role : la structure n'est pas exposée aux lecteurs d'écran",
        ),
        "keyboard_navigation": (
            ("tabindex",),
            "Aucun tabindex : la navigation au clavier n'est pas assurée",
        ),
        "multimodal_content": (
            ("alt=", "aria-label"),
            "Aucun texte alternatif ni aria-label : contenu non multimodal",
        ),
        "responsive_design": (
            ("@media",),
            "Aucune media query : la mise en page n'est pas adaptative",
        ),
        "math_accessibility": (
            ('role="math"',),
            'Aucun role="math" : les formules ne sont pas accessibles',
        ),
    }
    _AAA_THRESHOLD: ClassVar[float] = 90

    def validate(self, text: str) -> ValidationResult:
        flags = {
            name: any(marker in text for marker in markers)
            for name, (markers, _warning) in self._CRITERIA.items()
        }
        warnings = tuple(
            warning for name, (_markers, warning) in self._CRITERIA.items() if not flags[name]
        )
        score = sum(flags.values()) * 100 / len(flags)

        Log.info(f"Accessibility score {score:.0f}/100 ({len(warnings)} warnings)")
        return ValidationResult(
            **flags,
            score=score,
            wcag_aaa=score >= self._AAA_THRESHOLD,
            grade=accessibility_grade(score),
            warnings=warnings,
        )
