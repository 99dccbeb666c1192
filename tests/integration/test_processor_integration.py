import json
from pathlib import Path

import pytest

from pedagogy.analysis.models import ContentType, Level
from pedagogy.config.settings import Settings
from pedagogy.main import DEMO_CONTENT, DEMO_STEM, run
from pedagogy.processor.processor import build_processor
from pedagogy.registry.models import Discipline
from tests.factories import FRACTIONS_TEXT


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(output_dir=str(tmp_path / "out"), mini_game_seed=5, log_level="DEBUG")


class TestEndToEnd:
    def test_fractions_lesson(self, settings: Settings) -> None:
        result = build_processor(settings).process(FRACTIONS_TEXT, {"title": "Les Fractions"})

        assert result.analysis.discipline is Discipline.MATHEMATICS
        assert result.analysis.content_type is ContentType.EXERCICES
        assert result.analysis.exercises == ()
        assert all(len(r.suggestions) == 4 for r in result.resources)
        assert result.validation.score == 100
        assert result.validation.wcag_aaa is True
        assert result.export_config.discipline_features["theorem_boxes"] == "bordered-highlighting"
        assert result.usage_guide.title == "Guide d'utilisation - Mathématiques"
        assert "<title>Les Fractions - Mathématiques</title>" in result.document.html

    def test_seeded_runs_are_identical(self, settings: Settings) -> None:
        processor = build_processor(settings)

        first = processor.process(FRACTIONS_TEXT, {"title": "Les Fractions"})
        second = processor.process(FRACTIONS_TEXT, {"title": "Les Fractions"})

        assert first.document.html == second.document.html

    def test_unrecognised_text_still_transforms(self, settings: Settings) -> None:
        result = build_processor(settings).process("Bonjour, il fait beau aujourd'hui.")

        assert result.analysis.discipline is Discipline.GENERIC
        assert result.export_config.discipline_features["accessibility_compliance"] == "wcag-aa"
        assert "Contenu pédagogique adapté à la discipline Multidisciplinaire" in (
            result.document.html
        )
        assert result.validation.score == 80


class TestCommandLine:
    def test_demo_lesson_is_written(self, settings: Settings) -> None:
        report = run(settings)

        out = Path(settings.output_dir)
        assert report.ok
        assert (out / f"{DEMO_STEM}.html").read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
        export = json.loads((out / f"{DEMO_STEM}.export.json").read_text(encoding="utf-8"))
        assert export["metadata"]["title"] == "Démonstration - Les Fractions"
        report_json = json.loads((out / f"{DEMO_STEM}.report.json").read_text(encoding="utf-8"))
        assert report_json["analysis"]["discipline"] == "mathematics"
        assert report_json["analysis"]["level"] == Level.PRIMAIRE.value
        assert report_json["validation"]["grade"] == "Excellent (AAA)"

    def test_directory_input(self, settings: Settings, tmp_path: Path) -> None:
        lessons = tmp_path / "lessons"
        lessons.mkdir()
        (lessons / "fractions.md").write_text(DEMO_CONTENT, encoding="utf-8")
        (lessons / "roman.txt").write_text(
            "Le roman et son narrateur : analyser le style de l'auteur.", encoding="utf-8"
        )
        (lessons / "image.png").write_bytes(b"\x89PNG")
        settings.input_path = str(lessons)

        report = run(settings)

        assert report.ok
        assert sorted(report.written) == ["fractions.md", "roman.txt"]
        roman = json.loads(
            (Path(settings.output_dir) / "roman.report.json").read_text(encoding="utf-8")
        )
        assert roman["analysis"]["discipline"] == "literature"
        assert roman["analysis"]["metadata"]["title"] == "roman"

    def test_pdf_input(
        self, settings: Settings, tmp_path: Path, lesson_pdf_bytes: bytes
    ) -> None:
        path = tmp_path / "lesson.pdf"
        path.write_bytes(lesson_pdf_bytes)
        settings.input_path = str(path)
        settings.document_title = "Leçon PDF"

        report = run(settings)

        assert report.ok
        assert (Path(settings.output_dir) / "lesson.html").is_file()

    def test_missing_input_is_reported(self, settings: Settings, tmp_path: Path) -> None:
        settings.input_path = str(tmp_path / "absent.txt")

        report = run(settings)

        assert not report.ok
        assert "absent.txt" in report.failed
