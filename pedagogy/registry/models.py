from dataclasses import dataclass, field
from enum import StrEnum


class Discipline(StrEnum):
    """Subject-matter categories, in registration order."""

    MATHEMATICS = "mathematics"
    LITERATURE = "literature"
    SCIENCE = "science"
    HISTORY = "history"
    GEOGRAPHY = "geography"
    LANGUAGES = "languages"
    ARTS = "arts"
    GENERIC = "generic"

    @classmethod
    def from_key(cls, key: object) -> "Discipline":
        """Resolve a discipline key, falling back to GENERIC for anything unknown."""
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).strip().lower())
        except ValueError:
            return cls.GENERIC

    @classmethod
    def detectable(cls) -> tuple["Discipline", ...]:
        """Every discipline except the GENERIC fallback."""
        return tuple(d for d in cls if d is not cls.GENERIC)


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    accent: str


@dataclass(frozen=True)
class FontHints:
    """Font families; `extra` holds role-specific families (formulas, quotes...)."""

    main: str
    extra: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DisciplineProfile:
    key: Discipline
    name: str
    icon: str
    colors: ColorPalette
    fonts: FontHints
    tools: tuple[str, ...]
    visual_elements: tuple[str, ...]
    cognitive_emphasis: str


@dataclass
class AccessibilityFeature:
    """A togglable presentation variant.

    `enabled` is flipped by the consuming UI, never by the pipeline.
    """

    id: str
    name: str
    description: str
    css_class: str
    enabled: bool = False


@dataclass(frozen=True)
class CognitiveBreak:
    """Mini-game descriptor embedded as an interactive pause."""

    type: str
    name: str
    details: dict[str, str] = field(default_factory=dict)
