from dataclasses import dataclass, field

from pedagogy.registry.models import CognitiveBreak, Discipline


@dataclass(frozen=True)
class GeneratedDocument:
    """Serialized accessible document plus the sections it was assembled from."""

    html: str
    discipline: Discipline
    cognitive_break: CognitiveBreak
    sections: dict[str, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.html)
