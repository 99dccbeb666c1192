from pedagogy.registry.models import Discipline
from pedagogy.resources.models import QueryFormat, ResourceSource

COMMON_SOURCES: tuple[ResourceSource, ...] = (
    ResourceSource("Unsplash", "https://unsplash.com/s/photos/", QueryFormat.SIMPLE),
    ResourceSource(
        "Wikimedia Commons",
        "https://commons.wikimedia.org/w/index.php?search=",
        QueryFormat.ENCODED,
    ),
)

DISCIPLINE_SOURCES: dict[Discipline, tuple[ResourceSource, ...]] = {
    Discipline.MATHEMATICS: (
        ResourceSource("OpenStax", "https://openstax.org/search?q=", QueryFormat.ENCODED),
        ResourceSource(
            "GeoGebra Materials",
            "https://www.geogebra.org/materials/search/query/",
            QueryFormat.SIMPLE,
        ),
    ),
    Discipline.LITERATURE: (
        ResourceSource(
            "Gallica BnF",
            "https://gallica.bnf.fr/services/engine/search/sru?query=",
            QueryFormat.ENCODED,
        ),
        ResourceSource(
            "Project Gutenberg",
            "https://www.gutenberg.org/ebooks/search/?query=",
            QueryFormat.ENCODED,
        ),
    ),
    Discipline.SCIENCE: (
        ResourceSource("NASA Image Gallery", "https://images.nasa.gov/search?q=", QueryFormat.ENCODED),
        ResourceSource("CERN Document Server", "https://cds.cern.ch/search?p=", QueryFormat.ENCODED),
    ),
}
