import pytest

from pedagogy.analysis.models import ResourceNeed
from pedagogy.registry.models import Discipline
from pedagogy.resources.exceptions import QueryFormatError
from pedagogy.resources.models import QueryFormat
from pedagogy.resources.resolver import ResourceResolver, format_query
from tests.factories import make_analysis


class TestFormatQuery:
    def test_simple_joins_with_hyphens(self) -> None:
        assert format_query(["nombre entier", "fraction"], QueryFormat.SIMPLE) == (
            "nombre-entier-fraction"
        )

    def test_encoded_percent_encodes(self) -> None:
        assert format_query(["équation", "du second"], QueryFormat.ENCODED) == (
            "%C3%A9quation%20du%20second"
        )

    def test_non_string_keyword_raises(self) -> None:
        with pytest.raises(QueryFormatError):
            format_query(["fraction", 3], QueryFormat.SIMPLE)  # type: ignore[list-item]

    def test_unencodable_keyword_raises(self) -> None:
        with pytest.raises(QueryFormatError):
            format_query(["\ud800"], QueryFormat.ENCODED)


class TestResourceResolver:
    def test_four_suggestions_per_need_for_mathematics(self) -> None:
        results = ResourceResolver().resolve(make_analysis(Discipline.MATHEMATICS))

        assert len(results) == 2
        for result in results:
            assert [s.source for s in result.suggestions] == [
                "Unsplash",
                "Wikimedia Commons",
                "OpenStax",
                "GeoGebra Materials",
            ]

    def test_discipline_without_sources_uses_common_set(self) -> None:
        results = ResourceResolver().resolve(make_analysis(Discipline.HISTORY))
        assert all(len(r.suggestions) == 2 for r in results)

    def test_suggestion_fields(self) -> None:
        (first, _) = ResourceResolver().resolve(make_analysis(Discipline.MATHEMATICS))
        unsplash = first.suggestions[0]

        assert unsplash.query == "mathematics-fraction"
        assert unsplash.url == "https://unsplash.com/s/photos/mathematics-fraction"
        assert unsplash.description == "Illustration principale depuis Unsplash"
        assert first.resource.type == "image-principale"

    def test_unformattable_query_only_drops_that_suggestion(self) -> None:
        broken_need = ResourceNeed(
            type="image-principale",
            description="Illustration",
            sources=(),
            keywords=("mathematics", "\ud800"),
        )
        analysis = make_analysis(Discipline.MATHEMATICS, resources_needed=(broken_need,))

        (result,) = ResourceResolver().resolve(analysis)

        assert [s.source for s in result.suggestions] == ["Unsplash", "GeoGebra Materials"]

    def test_no_needs_gives_no_suggestions(self) -> None:
        analysis = make_analysis(Discipline.SCIENCE, resources_needed=())
        assert ResourceResolver().resolve(analysis) == []
