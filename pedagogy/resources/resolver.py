import re
from collections.abc import Mapping, Sequence
from urllib.parse import quote

from pedagogy.analysis.models import DocumentAnalysis, ResourceNeed
from pedagogy.logging.logger import Log
from pedagogy.registry.models import Discipline
from pedagogy.resources.exceptions import QueryFormatError
from pedagogy.resources.models import (
    QueryFormat,
    ResourceSource,
    ResourceSuggestion,
    Suggestion,
)
from pedagogy.resources.sources import COMMON_SOURCES, DISCIPLINE_SOURCES

_WHITESPACE_RE = re.compile(r"\s+")


def format_query(keywords: Sequence[str], query_format: QueryFormat) -> str:
    """Build a search query from keywords.

    Raises:
        QueryFormatError: if a keyword is not a string or cannot be encoded.
    """
    if not all(isinstance(k, str) for k in keywords):
        raise QueryFormatError(f"Keywords must be strings: {list(keywords)!r}")
    query = " ".join(keywords)
    if query_format == QueryFormat.ENCODED:
        try:
            # Same reserved set as encodeURIComponent.
            return quote(query, safe="-_.!~*'()")
        except UnicodeEncodeError as exc:
            raise QueryFormatError(f"Cannot encode query {query!r}: {exc}") from exc
    return _WHITESPACE_RE.sub("-", query)


class ResourceResolver:
    """Expands resource needs into search-query suggestions.

    Builds URLs only; fetching them is left to an external collaborator.
    """

    def __init__(
        self,
        common_sources: Sequence[ResourceSource] = COMMON_SOURCES,
        discipline_sources: Mapping[Discipline, Sequence[ResourceSource]] = DISCIPLINE_SOURCES,
    ) -> None:
        self._common_sources = tuple(common_sources)
        self._discipline_sources = {d: tuple(s) for d, s in discipline_sources.items()}

    def sources_for(self, discipline: object) -> tuple[ResourceSource, ...]:
        """Common sources followed by the discipline's own, if any."""
        key = Discipline.from_key(discipline)
        return self._common_sources + self._discipline_sources.get(key, ())

    def resolve(self, analysis: DocumentAnalysis) -> list[ResourceSuggestion]:
        sources = self.sources_for(analysis.discipline)
        results = [
            ResourceSuggestion(resource=need, suggestions=self._suggest(need, sources))
            for need in analysis.resources_needed
        ]
        Log.info(
            f"Resolved {len(results)} resource needs against {len(sources)} sources "
            f"for {analysis.discipline}"
        )
        return results

    def _suggest(
        self,
        need: ResourceNeed,
        sources: Sequence[ResourceSource],
    ) -> tuple[Suggestion, ...]:
        suggestions: list[Suggestion] = []
        for source in sources:
            try:
                query = format_query(need.keywords, source.format)
            except QueryFormatError as exc:
                Log.warning(f"Skipping {source.name} suggestion for '{need.type}': {exc}")
                continue
            suggestions.append(
                Suggestion(
                    source=source.name,
                    query=query,
                    url=source.base_url + query,
                    description=f"{need.description} depuis {source.name}",
                )
            )
        return tuple(suggestions)
