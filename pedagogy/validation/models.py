from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the five textual accessibility checks."""

    screen_reader_compatible: bool
    keyboard_navigation: bool
    multimodal_content: bool
    responsive_design: bool
    math_accessibility: bool
    score: float
    wcag_aaa: bool
    grade: str
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def passed_checks(self) -> int:
        return sum(
            (
                self.screen_reader_compatible,
                self.keyboard_navigation,
                self.multimodal_content,
                self.responsive_design,
                self.math_accessibility,
            )
        )
