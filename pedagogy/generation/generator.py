"""Accessible document generator.

Assembles six sections from string.Template files:
head, header, main, aside, footer and the behaviour script.
Content and exercise blocks are picked per discipline with a generic fallback.
"""

import json
import random
from collections.abc import Sequence
from dataclasses import asdict
from datetime import datetime
from html import escape
from pathlib import Path
from string import Template
from typing import ClassVar

from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.generation.base import BaseDocumentGenerator
from pedagogy.generation.dates import IcuDateFormatter
from pedagogy.generation.exceptions import GenerationError
from pedagogy.generation.knowledge import SPEECH_SETTINGS, knowledge_for
from pedagogy.generation.models import GeneratedDocument
from pedagogy.generation.template_loader import load_discipline_template, load_template
from pedagogy.logging.logger import Log
from pedagogy.registry.models import CognitiveBreak, Discipline, DisciplineProfile
from pedagogy.registry.registry import DisciplineRegistry
from pedagogy.resources.models import ResourceSuggestion

DEFAULT_AUTHOR = "EduLearning+ Universal Pedagogy AI"
DEFAULT_TITLE = "Document pédagogique"


class AccessibleDocumentGenerator(BaseDocumentGenerator):
    """Deterministic HTML assembly; the only randomness is the mini-game pick.

    With a `seed`, every call draws from a fresh `random.Random(seed)`, so equal
    inputs give byte-identical documents.
    """

    _REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "timestamp",
        "metadata",
        "discipline",
        "level",
        "content_type",
        "pedagogical_objectives",
    )
    _GLOSSARY_SIZE: ClassVar[int] = 5
    _KATEX_STYLESHEET: ClassVar[str] = (
        '    <link rel="stylesheet" '
        'href="https://cdn.jsdelivr.net/npm/katex@0.16.9/dist/katex.min.css">'
    )
    _FEATURE_ICONS: ClassVar[dict[str, str]] = {
        "high-contrast": "🌓",
        "dark-mode": "🌙",
        "dyslexia-friendly": "📖",
        "large-text": "🔍",
        "simplified-interface": "✨",
        "colorblind-friendly": "🎨",
        "screen-reader": "🦻",
        "motor-impairment": "⌨️",
    }

    def __init__(
        self,
        registry: DisciplineRegistry,
        date_formatter: IcuDateFormatter | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        language: str = "fr-FR",
        author: str = DEFAULT_AUTHOR,
        template_root: Path | None = None,
    ) -> None:
        self._registry = registry
        self._date_formatter = date_formatter or IcuDateFormatter()
        self._seed = seed
        self._rng = rng or random.Random()
        self._language = language
        self._author = author
        self._template_root = template_root

    def generate(
        self,
        analysis: DocumentAnalysis,
        resources: Sequence[ResourceSuggestion] = (),
    ) -> GeneratedDocument:
        try:
            self._check_analysis(analysis)
            return self._run(analysis, resources)
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(f"Impossible de générer le document: {exc}") from exc

    def _check_analysis(self, analysis: object) -> None:
        if not isinstance(analysis, DocumentAnalysis):
            raise GenerationError(
                f"Expected a DocumentAnalysis, got {type(analysis).__name__}"
            )
        missing = [name for name in self._REQUIRED_FIELDS if getattr(analysis, name, None) is None]
        if missing:
            raise GenerationError(f"Analysis is missing required fields: {', '.join(missing)}")
        if not isinstance(analysis.timestamp, datetime):
            raise GenerationError("Analysis timestamp must be a datetime")

    def _run(
        self,
        analysis: DocumentAnalysis,
        resources: Sequence[ResourceSuggestion],
    ) -> GeneratedDocument:
        discipline = Discipline.from_key(analysis.discipline)
        profile = self._registry.get_profile(discipline)
        title = analysis.metadata.title or DEFAULT_TITLE
        mini_game = self._pick_cognitive_break(discipline)

        sections = {
            "head": self._render_head(analysis, profile, title),
            "header": self._render_header(analysis, profile, title),
            "main": self._render_main(analysis, profile, mini_game),
            "aside": self._render_aside(analysis, profile, resources),
            "footer": self._render_footer(analysis, profile),
            "scripts": self._render_scripts(analysis, discipline),
        }
        html = self._substitute(
            self._load("page.html"),
            language=escape(self._language),
            **sections,
        )

        Log.info(
            f"Generated {discipline.value} document '{title}': {len(html)} chars, "
            f"mini-game={mini_game.type}"
        )
        return GeneratedDocument(
            html=html,
            discipline=discipline,
            cognitive_break=mini_game,
            sections=sections,
        )

    def _pick_cognitive_break(self, discipline: Discipline) -> CognitiveBreak:
        rng = random.Random(self._seed) if self._seed is not None else self._rng
        return rng.choice(self._registry.get_cognitive_breaks(discipline))

    # ---- Sections ----

    def _render_head(
        self, analysis: DocumentAnalysis, profile: DisciplineProfile, title: str
    ) -> str:
        keywords = ", ".join(entry.term for entry in analysis.specialized_vocabulary)
        extra_links = self._KATEX_STYLESHEET if profile.key is Discipline.MATHEMATICS else ""
        styles = self._substitute(
            self._load("styles.css"),
            primary=profile.colors.primary,
            secondary=profile.colors.secondary,
            accent=profile.colors.accent,
            font_main=profile.fonts.main,
        )
        return self._substitute(
            self._load("head.html"),
            description=escape(
                f"Ressource pédagogique accessible - {profile.name} - {analysis.level}"
            ),
            keywords=escape(keywords),
            author=escape(self._author),
            title=escape(title),
            discipline_name=escape(profile.name),
            theme_color=profile.colors.primary,
            extra_links=extra_links,
            styles=styles,
        )

    def _render_header(
        self, analysis: DocumentAnalysis, profile: DisciplineProfile, title: str
    ) -> str:
        buttons = []
        for feature_id, feature in self._registry.get_accessibility_features().items():
            icon = self._FEATURE_ICONS.get(feature_id, "⚙️")
            buttons.append(
                f'        <button class="accessibility-btn" data-feature="{escape(feature_id)}" '
                f"onclick=\"toggleAccessibility('{escape(feature_id)}')\" aria-pressed=\"false\" "
                f'aria-label="{escape(feature.name)}" title="{escape(feature.description)}">'
                f"{icon}</button>"
            )
        return self._substitute(
            self._load("header.html"),
            toolbar_buttons="\n".join(buttons),
            icon=profile.icon,
            discipline_name=escape(profile.name),
            level=escape(str(analysis.level)),
            title=escape(title),
        )

    def _render_main(
        self,
        analysis: DocumentAnalysis,
        profile: DisciplineProfile,
        mini_game: CognitiveBreak,
    ) -> str:
        objectives = "\n".join(
            f"                    <li><strong>{escape(kind.capitalize())}</strong> : "
            f"{escape(text)}</li>"
            for kind, text in analysis.pedagogical_objectives.items()
        )
        content = self._substitute(
            load_discipline_template("content", profile.key, self._template_root),
            discipline_name=escape(profile.name),
        )
        exercises = self._substitute(
            load_discipline_template("exercises", profile.key, self._template_root),
            discipline_name=escape(profile.name),
        )
        game = self._substitute(
            self._load("mini_game.html"),
            name=escape(mini_game.name),
            type=escape(mini_game.type),
        )
        return self._substitute(
            self._load("main.html"),
            objectives=objectives,
            discipline=profile.key.value,
            content=content,
            discipline_name=escape(profile.name),
            mini_game=game,
            exercises=exercises,
        )

    def _render_aside(
        self,
        analysis: DocumentAnalysis,
        profile: DisciplineProfile,
        resources: Sequence[ResourceSuggestion],
    ) -> str:
        tools = "\n".join(
            f"                <li><button class=\"btn btn-outline\" "
            f"onclick=\"useTool('{escape(tool)}')\">{escape(tool)}</button></li>"
            for tool in profile.tools
        )
        glossary = "\n".join(
            f'                <dt><span class="glossary-term" tabindex="0" '
            f'data-definition="{escape(entry.definition)}">{escape(entry.term)}</span> '
            f'<span class="pronunciation">{escape(entry.pronunciation)}</span></dt>\n'
            f"                <dd>{escape(entry.definition)}</dd>"
            for entry in analysis.specialized_vocabulary[: self._GLOSSARY_SIZE]
        )
        return self._substitute(
            self._load("aside.html"),
            discipline_name=escape(profile.name),
            tools=tools,
            glossary=glossary,
            suggestions=self._render_suggestions(resources),
        )

    @staticmethod
    def _render_suggestions(resources: Sequence[ResourceSuggestion]) -> str:
        links = [
            f'                <li><a href="{escape(s.url)}" target="_blank" rel="noopener">'
            f"{escape(s.description)}</a></li>"
            for resource in resources
            for s in resource.suggestions
        ]
        if not links:
            return ""
        return (
            "            <h4>Suggestions de ressources</h4>\n"
            '            <ul class="resource-suggestions">\n'
            + "\n".join(links)
            + "\n            </ul>"
        )

    def _render_footer(self, analysis: DocumentAnalysis, profile: DisciplineProfile) -> str:
        return self._substitute(
            self._load("footer.html"),
            author=escape(self._author),
            discipline=escape(profile.name),
            level=escape(str(analysis.level)),
            date=escape(self._date_formatter.format(analysis.timestamp)),
        )

    def _render_scripts(self, analysis: DocumentAnalysis, discipline: Discipline) -> str:
        features = {
            feature_id: asdict(feature)
            for feature_id, feature in self._registry.get_accessibility_features().items()
        }
        return self._substitute(
            self._load("scripts.html"),
            discipline=self._to_js(discipline.value),
            level=self._to_js(str(analysis.level)),
            knowledge_base=self._to_js(knowledge_for(discipline)),
            speech_settings=self._to_js(SPEECH_SETTINGS),
            accessibility_features=self._to_js(features),
        )

    # ---- Helpers ----

    def _load(self, name: str) -> Template:
        return load_template(name, self._template_root)

    @staticmethod
    def _to_js(value: object) -> str:
        # "</" would close the surrounding <script> element.
        return json.dumps(value, ensure_ascii=False, sort_keys=True).replace("</", "<\\/")

    @staticmethod
    def _substitute(template: Template, **values: object) -> str:
        try:
            return template.substitute(**values)
        except (KeyError, ValueError) as exc:
            raise GenerationError(f"Template substitution failed: {exc}") from exc
