from pathlib import Path
from string import Template

from pedagogy.generation.exceptions import TemplateLoadError
from pedagogy.registry.models import Discipline

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_template(name: str, root: Path | None = None) -> Template:
    """Load a section template from a file.

    Args:
        name: File name relative to the template directory (e.g. "head.html").
        root: Template directory. Defaults to the bundled templates.

    Returns:
        A string.Template with `$name` placeholders.

    Raises:
        TemplateLoadError: if the file cannot be read.
    """
    if root is None:
        root = _DEFAULT_TEMPLATE_DIR
    try:
        return Template((root / name).read_text(encoding="utf-8"))
    except OSError as exc:
        raise TemplateLoadError(f"Failed to load template '{name}': {exc}") from exc


def load_discipline_template(
    family: str,
    discipline: Discipline,
    root: Path | None = None,
) -> Template:
    """Load `<family>/<discipline>.html`, falling back to `<family>/generic.html`."""
    if root is None:
        root = _DEFAULT_TEMPLATE_DIR
    if (root / family / f"{discipline.value}.html").is_file():
        return load_template(f"{family}/{discipline.value}.html", root)
    return load_template(f"{family}/{Discipline.GENERIC.value}.html", root)
