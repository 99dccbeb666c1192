from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from pedagogy.registry.models import Discipline


class Level(StrEnum):
    PRIMAIRE = "primaire"
    COLLEGE = "collège"
    LYCEE = "lycée"
    SUPERIEUR = "supérieur"
    PROFESSIONNEL = "professionnel"


class ContentType(StrEnum):
    COURS = "cours"
    EXERCICES = "exercices"
    EVALUATION = "évaluation"
    PROJET = "projet"


@dataclass(frozen=True)
class DocumentMetadata:
    """Caller-supplied document metadata, passed through untouched."""

    file_name: str | None = None
    file_type: str | None = None
    file_size: int | None = None
    title: str | None = None
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ResourceNeed:
    type: str
    description: str
    sources: tuple[str, ...]
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class VocabularyEntry:
    term: str
    definition: str
    pronunciation: str
    difficulty: str  # "facile" | "moyen" | "difficile"


@dataclass(frozen=True)
class DocumentAnalysis:
    """Derived facts about one document. Never mutated after creation."""

    timestamp: datetime
    original_content: str
    metadata: DocumentMetadata
    discipline: Discipline
    level: Level
    content_type: ContentType
    pedagogical_objectives: dict[str, str]
    visual_elements: tuple[str, ...] = ()
    resources_needed: tuple[ResourceNeed, ...] = ()
    specialized_vocabulary: tuple[VocabularyEntry, ...] = ()
    exercises: tuple[str, ...] = ()
    transversal_skills: tuple[str, ...] = ()


_METADATA_KEYS = {
    "fileName": "file_name",
    "file_name": "file_name",
    "fileType": "file_type",
    "file_type": "file_type",
    "fileSize": "file_size",
    "file_size": "file_size",
    "title": "title",
}


def metadata_from_mapping(raw: Mapping[str, object]) -> DocumentMetadata:
    """Build DocumentMetadata from a loose mapping; unknown keys land in `extra`."""
    known: dict[str, Any] = {}
    extra: dict[str, object] = {}
    for key, value in raw.items():
        target = _METADATA_KEYS.get(key)
        if target is None:
            extra[key] = value
        else:
            known[target] = value
    return DocumentMetadata(**known, extra=extra)
