"""Deterministic keyword/heuristic document analyzer.

Processing flow:
1. Discipline detection (keyword occurrence scores, ties go to registration order).
2. Level detection (indicator words, then a complexity score).
3. Content-type detection (fixed marker priority).
4. Objectives lookup (per-discipline triplet, generic fallback).
5. Visual-element identification against the discipline profile.
6. Resource needs (always two: main illustration + explanatory diagram).
7. Specialized vocabulary (capitalized words, at most 10).
8. Exercise tagging (discipline verb list).
9. Transversal skills.
"""

import re
from collections import Counter
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import ClassVar

from pedagogy.analysis.base import BaseDocumentAnalyzer
from pedagogy.analysis.exceptions import AnalysisError
from pedagogy.analysis.keywords import (
    COMPLEXITY_THRESHOLDS,
    CONTENT_TYPE_MARKERS,
    DISCIPLINE_KEYWORDS,
    EXERCISE_PATTERNS,
    GENERIC_EXERCISE_PATTERNS,
    GENERIC_OBJECTIVES,
    LEVEL_INDICATORS,
    PEDAGOGICAL_OBJECTIVES,
    TRANSVERSAL_SKILLS,
    VISUAL_KEYWORDS,
)
from pedagogy.analysis.models import (
    ContentType,
    DocumentAnalysis,
    DocumentMetadata,
    Level,
    ResourceNeed,
    VocabularyEntry,
    metadata_from_mapping,
)
from pedagogy.logging.logger import Log
from pedagogy.registry.models import Discipline
from pedagogy.registry.registry import DisciplineRegistry


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentAnalyzer(BaseDocumentAnalyzer):
    """Keyword-scoring analyzer. Explainable and reproducible, not statistical."""

    _SENTENCE_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[.!?]+")
    _SEARCH_WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b\w{4,}\b")
    _TOKEN_RE: ClassVar[re.Pattern[str]] = re.compile(r"\w+")

    _LONG_WORD_LENGTH: ClassVar[int] = 6
    _MAX_SEARCH_KEYWORDS: ClassVar[int] = 5
    _MAX_VOCABULARY: ClassVar[int] = 10
    _MIN_TERM_LENGTH: ClassVar[int] = 5

    def __init__(
        self,
        registry: DisciplineRegistry,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._registry = registry
        self._clock = clock
        self._keyword_patterns: dict[Discipline, tuple[re.Pattern[str], ...]] = {
            discipline: tuple(re.compile(r"\b" + re.escape(k)) for k in keywords)
            for discipline, keywords in DISCIPLINE_KEYWORDS.items()
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self,
        text: str,
        metadata: DocumentMetadata | Mapping[str, object] | None = None,
    ) -> DocumentAnalysis:
        try:
            if metadata is None:
                metadata = DocumentMetadata()
            elif not isinstance(metadata, DocumentMetadata):
                metadata = metadata_from_mapping(metadata)
            return self._run(text, metadata)
        except AnalysisError:
            raise
        except Exception as exc:
            raise AnalysisError(f"Impossible d'analyser le document: {exc}") from exc

    def _run(self, text: str, metadata: DocumentMetadata) -> DocumentAnalysis:
        if not isinstance(text, str):
            raise AnalysisError(f"Document text must be a string, got {type(text).__name__}")

        lowered = text.lower()
        discipline = self.detect_discipline(text)
        level = self.detect_level(text)
        content_type = self.detect_content_type(text)

        analysis = DocumentAnalysis(
            timestamp=self._clock(),
            original_content=text,
            metadata=metadata,
            discipline=discipline,
            level=level,
            content_type=content_type,
            pedagogical_objectives=self.extract_objectives(discipline),
            visual_elements=self._identify_visual_elements(lowered, discipline),
            resources_needed=self._identify_resources_needed(lowered, discipline),
            specialized_vocabulary=self.extract_vocabulary(text, discipline),
            exercises=self._identify_exercises(lowered, discipline),
            transversal_skills=self._identify_transversal_skills(lowered),
        )

        Log.info(
            f"Analyzed document: discipline={discipline.value} level={level.value} "
            f"type={content_type.value} vocabulary={len(analysis.specialized_vocabulary)}"
        )
        return analysis

    # ------------------------------------------------------------------
    # Step 1: Discipline
    # ------------------------------------------------------------------

    def discipline_scores(self, text: str) -> dict[Discipline, int]:
        """Occurrence count of each discipline's keywords, in registration order."""
        lowered = text.lower()
        return {
            discipline: sum(len(p.findall(lowered)) for p in patterns)
            for discipline, patterns in self._keyword_patterns.items()
        }

    def detect_discipline(self, text: str) -> Discipline:
        scores = self.discipline_scores(text)
        readable = {d.value: s for d, s in scores.items()}
        Log.debug(f"Discipline scores: {readable}")
        # max() keeps the first of equal scores: ties go to registration order.
        best = max(scores, key=scores.__getitem__, default=Discipline.GENERIC)
        if scores.get(best, 0) <= 0:
            return Discipline.GENERIC
        return best

    # ------------------------------------------------------------------
    # Step 2: Level
    # ------------------------------------------------------------------

    def detect_level(self, text: str) -> Level:
        lowered = text.lower()
        for level, indicators in LEVEL_INDICATORS:
            if any(indicator in lowered for indicator in indicators):
                return level

        score = self.complexity_score(text)
        Log.debug(f"Complexity score: {score:.2f}")
        for upper_bound, level in COMPLEXITY_THRESHOLDS:
            if score < upper_bound:
                return level
        return Level.SUPERIEUR

    def complexity_score(self, text: str) -> float:
        """10 x avg word length + 2 x avg words per sentence + 100 x long-word ratio."""
        words = text.split()
        if not words:
            return 0.0
        sentences = [s for s in self._SENTENCE_SPLIT_RE.split(text) if s.strip()]
        sentence_count = max(len(sentences), 1)

        avg_word_length = sum(len(w) for w in words) / len(words)
        avg_sentence_length = len(words) / sentence_count
        long_words = sum(1 for w in words if len(w) > self._LONG_WORD_LENGTH)
        long_word_ratio = long_words / len(words)

        return avg_word_length * 10 + avg_sentence_length * 2 + long_word_ratio * 100

    # ------------------------------------------------------------------
    # Step 3: Content type
    # ------------------------------------------------------------------

    def detect_content_type(self, text: str) -> ContentType:
        lowered = text.lower()
        for content_type, markers in CONTENT_TYPE_MARKERS:
            if any(marker in lowered for marker in markers):
                return content_type
        return ContentType.COURS

    # ------------------------------------------------------------------
    # Step 4: Objectives
    # ------------------------------------------------------------------

    @staticmethod
    def extract_objectives(discipline: Discipline) -> dict[str, str]:
        return dict(PEDAGOGICAL_OBJECTIVES.get(discipline, GENERIC_OBJECTIVES))

    # ------------------------------------------------------------------
    # Step 5: Visual elements
    # ------------------------------------------------------------------

    def _identify_visual_elements(self, lowered: str, discipline: Discipline) -> tuple[str, ...]:
        profile = self._registry.get_profile(discipline)
        return tuple(
            element
            for element in profile.visual_elements
            if any(k in lowered for k in VISUAL_KEYWORDS.get(element, (element,)))
        )

    # ------------------------------------------------------------------
    # Step 6: Resource needs
    # ------------------------------------------------------------------

    def _identify_resources_needed(
        self, lowered: str, discipline: Discipline
    ) -> tuple[ResourceNeed, ...]:
        profile = self._registry.get_profile(discipline)
        return (
            ResourceNeed(
                type="image-principale",
                description=f"Illustration principale pour {profile.name}",
                sources=("Unsplash", "Wikimedia Commons", "Archives éducatives"),
                keywords=(discipline.value, *self._frequent_words(lowered)),
            ),
            ResourceNeed(
                type="schéma-explicatif",
                description="Schéma ou diagramme explicatif",
                sources=("OpenStax", "Ressources éducatives libres"),
                keywords=("diagram", "schema", discipline.value),
            ),
        )

    def _frequent_words(self, lowered: str) -> list[str]:
        # Counter keeps first-occurrence order and most_common() sorts stably,
        # so equal frequencies stay in document order.
        frequency = Counter(self._SEARCH_WORD_RE.findall(lowered))
        return [word for word, _ in frequency.most_common(self._MAX_SEARCH_KEYWORDS)]

    # ------------------------------------------------------------------
    # Step 7: Vocabulary
    # ------------------------------------------------------------------

    def extract_vocabulary(self, text: str, discipline: Discipline) -> tuple[VocabularyEntry, ...]:
        profile = self._registry.get_profile(discipline)
        terms: list[str] = []
        seen: set[str] = set()
        for token in self._TOKEN_RE.findall(text):
            if token in seen or not self._is_capitalized_word(token):
                continue
            seen.add(token)
            if len(token) >= self._MIN_TERM_LENGTH:
                terms.append(token)
            if len(terms) == self._MAX_VOCABULARY:
                break

        return tuple(
            VocabularyEntry(
                term=term,
                definition=f"Définition de {term} dans le contexte de {profile.name}",
                pronunciation=self.pronunciation(term),
                difficulty=self.term_difficulty(term),
            )
            for term in terms
        )

    @staticmethod
    def _is_capitalized_word(token: str) -> bool:
        return (
            len(token) > 1
            and token.isalpha()
            and token[0].isupper()
            and token[1:].islower()
        )

    @staticmethod
    def pronunciation(term: str) -> str:
        return "[" + term.lower().replace("qu", "k").replace("ch", "ʃ") + "]"

    @staticmethod
    def term_difficulty(term: str) -> str:
        if len(term) < 6:
            return "facile"
        if len(term) < 10:
            return "moyen"
        return "difficile"

    # ------------------------------------------------------------------
    # Steps 8-9: Exercises and transversal skills
    # ------------------------------------------------------------------

    @staticmethod
    def _identify_exercises(lowered: str, discipline: Discipline) -> tuple[str, ...]:
        patterns = EXERCISE_PATTERNS.get(discipline, GENERIC_EXERCISE_PATTERNS)
        return tuple(p for p in patterns if p in lowered)

    @staticmethod
    def _identify_transversal_skills(lowered: str) -> tuple[str, ...]:
        return tuple(
            skill
            for skill, keywords in TRANSVERSAL_SKILLS.items()
            if any(k in lowered for k in keywords)
        )
