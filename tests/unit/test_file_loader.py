from pathlib import Path

import pytest

from pedagogy.config.settings import Settings
from pedagogy.ingest.exceptions import InputNotFoundError, UnsupportedFileTypeError
from pedagogy.ingest.file_loader import FileLoader, guess_file_type


class TestGuessFileType:
    def test_markdown(self) -> None:
        assert guess_file_type(Path("cours.MD")) == "text/markdown"

    def test_text_and_pdf(self) -> None:
        assert guess_file_type(Path("cours.txt")) == "text/plain"
        assert guess_file_type(Path("cours.pdf")) == "application/pdf"


class TestFileLoader:
    def test_loads_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "fractions.txt"
        path.write_text("Une fraction\n", encoding="utf-8")

        loaded = FileLoader(Settings()).load(path)

        assert loaded.text == "Une fraction"
        assert loaded.metadata.file_name == "fractions.txt"
        assert loaded.metadata.file_type == "text/plain"
        assert loaded.metadata.file_size == len("Une fraction\n".encode())
        assert loaded.metadata.title == "fractions"

    def test_explicit_title_wins(self, tmp_path: Path) -> None:
        path = tmp_path / "cours.md"
        path.write_text("# Titre", encoding="utf-8")
        assert FileLoader(Settings()).load(path, title="Leçon 1").metadata.title == "Leçon 1"

    def test_loads_pdf(self, tmp_path: Path, lesson_pdf_bytes: bytes) -> None:
        path = tmp_path / "lesson.pdf"
        path.write_bytes(lesson_pdf_bytes)

        loaded = FileLoader(Settings()).load(path)

        assert "fraction" in loaded.text
        assert loaded.metadata.file_type == "application/pdf"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(InputNotFoundError):
            FileLoader(Settings()).load(tmp_path / "absent.txt")

    @pytest.mark.parametrize("name", ["notes.docx", "notes.unknownext"])
    def test_unsupported_file_raises(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.write_bytes(b"data")
        with pytest.raises(UnsupportedFileTypeError):
            FileLoader(Settings()).load(path)


class TestDiscover:
    def test_lists_supported_files_sorted(self, tmp_path: Path) -> None:
        for name in ("c.md", "a.txt", "b.pdf", "d.docx"):
            (tmp_path / name).write_bytes(b"x")
        (tmp_path / "sub").mkdir()

        found = FileLoader(Settings()).discover(tmp_path)

        assert [p.name for p in found] == ["a.txt", "b.pdf", "c.md"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(InputNotFoundError):
            FileLoader(Settings()).discover(tmp_path / "absent")
