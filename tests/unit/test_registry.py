import pytest

from pedagogy.registry.catalogue import ACCESSIBILITY_FEATURES, COGNITIVE_BREAKS, DISCIPLINE_PROFILES
from pedagogy.registry.models import Discipline
from pedagogy.registry.registry import DisciplineRegistry


class TestDisciplineKey:
    def test_from_key_accepts_strings(self) -> None:
        assert Discipline.from_key("mathematics") is Discipline.MATHEMATICS
        assert Discipline.from_key("  Science ") is Discipline.SCIENCE

    def test_from_key_unknown_is_generic(self) -> None:
        assert Discipline.from_key("astrology") is Discipline.GENERIC
        assert Discipline.from_key(None) is Discipline.GENERIC

    def test_detectable_excludes_generic(self) -> None:
        assert Discipline.GENERIC not in Discipline.detectable()
        assert len(Discipline.detectable()) == 7


class TestProfiles:
    @pytest.mark.parametrize("discipline", list(Discipline))
    def test_every_profile_is_complete(
        self, registry: DisciplineRegistry, discipline: Discipline
    ) -> None:
        profile = registry.get_profile(discipline)
        assert profile.key is discipline
        assert profile.name
        assert profile.icon
        assert profile.colors.primary.startswith("#")
        assert profile.colors.secondary.startswith("#")
        assert profile.colors.accent.startswith("#")

    def test_unknown_profile_falls_back_to_generic(self, registry: DisciplineRegistry) -> None:
        assert registry.get_profile("cooking").key is Discipline.GENERIC
        assert registry.get_profile("cooking").name == "Multidisciplinaire"

    def test_requires_generic_profile(self) -> None:
        profiles = [p for p in DISCIPLINE_PROFILES if p.key is not Discipline.GENERIC]
        with pytest.raises(ValueError, match="generic"):
            DisciplineRegistry(profiles, ACCESSIBILITY_FEATURES, COGNITIVE_BREAKS)


class TestCognitiveBreaks:
    def test_known_discipline_has_its_own_games(self, registry: DisciplineRegistry) -> None:
        types = [g.type for g in registry.get_cognitive_breaks(Discipline.MATHEMATICS)]
        assert "mental-calculation" in types

    def test_missing_catalogue_falls_back_to_generic(self) -> None:
        breaks = {
            Discipline.GENERIC: COGNITIVE_BREAKS[Discipline.GENERIC],
        }
        registry = DisciplineRegistry(DISCIPLINE_PROFILES, ACCESSIBILITY_FEATURES, breaks)
        assert registry.get_cognitive_breaks(Discipline.ARTS) == COGNITIVE_BREAKS[Discipline.GENERIC]


class TestAccessibilityFeatures:
    def test_features_keep_registration_order(self, registry: DisciplineRegistry) -> None:
        ids = list(registry.get_accessibility_features())
        assert ids[0] == "high-contrast"
        assert ids[-1] == "motor-impairment"
        assert len(ids) == 8

    def test_toggling_a_copy_leaves_registry_untouched(self, registry: DisciplineRegistry) -> None:
        features = registry.get_accessibility_features()
        features["dark-mode"].enabled = True

        assert registry.get_accessibility_features()["dark-mode"].enabled is False
        assert registry.summary()["enabled_features"] == 0


class TestRegistrySummary:
    def test_disciplines_in_registration_order(self, registry: DisciplineRegistry) -> None:
        assert registry.disciplines()[0] is Discipline.MATHEMATICS
        assert registry.disciplines()[-1] is Discipline.GENERIC

    def test_summary_counts(self, registry: DisciplineRegistry) -> None:
        summary = registry.summary()
        assert summary["disciplines"] == 8
        assert summary["accessibility_features"] == 8
        assert summary["cognitive_breaks"]["science"] == 4
