from collections.abc import Iterable, Mapping
from dataclasses import replace

from pedagogy.registry.catalogue import (
    ACCESSIBILITY_FEATURES,
    COGNITIVE_BREAKS,
    DISCIPLINE_PROFILES,
)
from pedagogy.registry.models import (
    AccessibilityFeature,
    CognitiveBreak,
    Discipline,
    DisciplineProfile,
)


class DisciplineRegistry:
    """Read-only catalogue of discipline profiles, accessibility features and mini-games.

    Every lookup degrades to the GENERIC entry, so unknown keys never fail.
    """

    def __init__(
        self,
        profiles: Iterable[DisciplineProfile],
        accessibility_features: Iterable[AccessibilityFeature],
        cognitive_breaks: Mapping[Discipline, Iterable[CognitiveBreak]],
    ) -> None:
        self._profiles: dict[Discipline, DisciplineProfile] = {p.key: p for p in profiles}
        if Discipline.GENERIC not in self._profiles:
            raise ValueError("Registry requires a generic discipline profile")
        self._features: dict[str, AccessibilityFeature] = {
            f.id: replace(f) for f in accessibility_features
        }
        self._breaks: dict[Discipline, tuple[CognitiveBreak, ...]] = {
            d: tuple(games) for d, games in cognitive_breaks.items() if games
        }
        if Discipline.GENERIC not in self._breaks:
            raise ValueError("Registry requires a generic cognitive-break catalogue")

    def get_profile(self, key: object) -> DisciplineProfile:
        discipline = Discipline.from_key(key)
        return self._profiles.get(discipline, self._profiles[Discipline.GENERIC])

    def get_cognitive_breaks(self, key: object) -> tuple[CognitiveBreak, ...]:
        discipline = Discipline.from_key(key)
        return self._breaks.get(discipline, self._breaks[Discipline.GENERIC])

    def get_accessibility_features(self) -> dict[str, AccessibilityFeature]:
        """Return copies of the feature descriptors in registration order.

        Callers may toggle `enabled` on the copies without touching the registry.
        """
        return {feature_id: replace(f) for feature_id, f in self._features.items()}

    def disciplines(self) -> tuple[Discipline, ...]:
        """Registered discipline keys in registration order."""
        return tuple(self._profiles)

    def summary(self) -> dict[str, object]:
        return {
            "disciplines": len(self._profiles),
            "accessibility_features": len(self._features),
            "enabled_features": sum(1 for f in self._features.values() if f.enabled),
            "cognitive_breaks": {d.value: len(games) for d, games in self._breaks.items()},
        }


def build_default_registry() -> DisciplineRegistry:
    """Build the registry from the bundled catalogues."""
    return DisciplineRegistry(
        profiles=DISCIPLINE_PROFILES,
        accessibility_features=ACCESSIBILITY_FEATURES,
        cognitive_breaks=COGNITIVE_BREAKS,
    )
