from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.export.features import features_for
from pedagogy.export.models import (
    AccessibilityOptions,
    ExportConfig,
    ExportMetadata,
    InteractivityOptions,
)
from pedagogy.generation.generator import DEFAULT_AUTHOR, DEFAULT_TITLE
from pedagogy.logging.logger import Log

DEFAULT_PRODUCER = "Universal Accessible Education System"


class PDFExportConfigurator:
    """Maps an analysis to the export configuration of an external PDF renderer."""

    def __init__(
        self,
        language: str = "fr-FR",
        creator: str = DEFAULT_AUTHOR,
        producer: str = DEFAULT_PRODUCER,
    ) -> None:
        self._language = language
        self._creator = creator
        self._producer = producer

    def build(self, analysis: DocumentAnalysis) -> ExportConfig:
        discipline = str(analysis.discipline)
        config = ExportConfig(
            accessibility=AccessibilityOptions(language_specification=self._language),
            interactivity=InteractivityOptions(),
            discipline_features=features_for(analysis.discipline),
            metadata=ExportMetadata(
                title=analysis.metadata.title or DEFAULT_TITLE,
                subject=discipline,
                keywords=", ".join(v.term for v in analysis.specialized_vocabulary),
                creator=self._creator,
                producer=self._producer,
            ),
        )
        Log.info(
            f"Built export config for {discipline}: "
            f"{len(config.discipline_features)} discipline features"
        )
        return config
