from datetime import datetime, timezone
from pathlib import Path

import pytest

from pedagogy.generation.dates import IcuDateFormatter
from pedagogy.generation.exceptions import TemplateLoadError
from pedagogy.generation.knowledge import GENERIC_KNOWLEDGE, SPEECH_SETTINGS, knowledge_for
from pedagogy.generation.template_loader import load_discipline_template, load_template
from pedagogy.registry.models import Discipline


class TestIcuDateFormatter:
    def test_default_french_pattern(self) -> None:
        formatter = IcuDateFormatter()
        assert formatter.format(datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)) == "15/03/2024"

    def test_time_zone_shifts_the_day(self) -> None:
        formatter = IcuDateFormatter(time_zone="America/New_York")
        assert formatter.format(datetime(2024, 3, 15, 2, 0, tzinfo=timezone.utc)) == "14/03/2024"

    def test_naive_datetime_is_utc(self) -> None:
        assert IcuDateFormatter().format(datetime(2024, 1, 2, 23, 0)) == "02/01/2024"

    def test_custom_pattern(self) -> None:
        formatter = IcuDateFormatter(pattern="yyyy-MM-dd")
        assert formatter.format(datetime(2024, 3, 15, tzinfo=timezone.utc)) == "2024-03-15"


class TestTemplateLoader:
    def test_loads_bundled_template(self) -> None:
        template = load_template("footer.html")
        assert "$date" in template.template

    def test_missing_template_raises(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateLoadError, match="nope.html"):
            load_template("nope.html", tmp_path)

    def test_discipline_template_falls_back_to_generic(self, tmp_path: Path) -> None:
        (tmp_path / "content").mkdir()
        (tmp_path / "content" / "generic.html").write_text("generic $discipline_name")
        (tmp_path / "content" / "science.html").write_text("science")

        assert load_discipline_template("content", Discipline.SCIENCE, tmp_path).template == "science"
        assert load_discipline_template("content", Discipline.ARTS, tmp_path).template == (
            "generic $discipline_name"
        )

    @pytest.mark.parametrize("discipline", list(Discipline))
    def test_every_discipline_has_bundled_blocks(self, discipline: Discipline) -> None:
        assert load_discipline_template("content", discipline).template
        assert load_discipline_template("exercises", discipline).template


class TestKnowledge:
    def test_known_discipline(self) -> None:
        knowledge = knowledge_for(Discipline.SCIENCE)
        assert "testable" in knowledge["hints"][1]  # type: ignore[index]

    def test_unknown_discipline_gets_generic(self) -> None:
        assert knowledge_for(Discipline.ARTS) is GENERIC_KNOWLEDGE

    def test_speech_settings_have_default(self) -> None:
        assert SPEECH_SETTINGS["default"] == {"rate": 0.9, "pitch": 1}
        assert SPEECH_SETTINGS["mathematics"]["rate"] == 0.7
