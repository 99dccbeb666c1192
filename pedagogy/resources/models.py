from dataclasses import dataclass
from enum import StrEnum

from pedagogy.analysis.models import ResourceNeed


class QueryFormat(StrEnum):
    SIMPLE = "simple"  # keywords joined with hyphens
    ENCODED = "encoded"  # percent-encoded, space-joined keywords


@dataclass(frozen=True)
class ResourceSource:
    name: str
    base_url: str
    format: QueryFormat


@dataclass(frozen=True)
class Suggestion:
    source: str
    query: str
    url: str
    description: str


@dataclass(frozen=True)
class ResourceSuggestion:
    resource: ResourceNeed
    suggestions: tuple[Suggestion, ...]
