from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class AccessibilityOptions:
    tagged: bool = True
    structural_elements: bool = True
    alternative_text: bool = True
    reading_order: bool = True
    language_specification: str = "fr-FR"


@dataclass(frozen=True)
class InteractivityOptions:
    preserve_links: bool = True
    bookmarks: bool = True
    forms: bool = True
    multimedia: str = "placeholder-with-description"
    navigation: str = "linear-and-structured"


@dataclass(frozen=True)
class ExportMetadata:
    title: str
    subject: str
    keywords: str
    creator: str
    producer: str


@dataclass(frozen=True)
class ExportConfig:
    """Instructions for an external PDF renderer; nothing is rendered here."""

    accessibility: AccessibilityOptions
    interactivity: InteractivityOptions
    discipline_features: dict[str, object] = field(default_factory=dict)
    metadata: ExportMetadata | None = None

    def as_dict(self) -> dict[str, object]:
        return asdict(self)
