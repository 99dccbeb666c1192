from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.guide.models import GuideSection, TechnicalRequirements, UsageGuide
from pedagogy.registry.models import Discipline
from pedagogy.registry.registry import DisciplineRegistry

DISCIPLINE_GUIDANCE: dict[Discipline, tuple[str, ...]] = {
    Discipline.MATHEMATICS: (
        "Formules lisibles par les lecteurs d'écran (MathML)",
        "Indices et solutions pas à pas pour chaque exercice",
        "Lecture vocale ralentie des formules",
    ),
    Discipline.LITERATURE: (
        "Citations mises en valeur et glossaire des termes littéraires",
        "Lecture vocale expressive des extraits",
        "Aide à l'analyse des procédés stylistiques",
    ),
    Discipline.SCIENCE: (
        "Démarche scientifique guidée : observation, hypothèse, expérience",
        "Schémas décrits pour les lecteurs d'écran",
        "Vocabulaire technique expliqué dans le glossaire",
    ),
    Discipline.HISTORY: (
        "Frise chronologique navigable au clavier",
        "Documents d'époque contextualisés",
    ),
    Discipline.GEOGRAPHY: (
        "Cartes accompagnées d'une description textuelle",
        "Légendes détaillées et repères d'échelle",
    ),
    Discipline.LANGUAGES: (
        "Transcriptions phonétiques dans le glossaire",
        "Lecture vocale adaptée à la prononciation",
    ),
    Discipline.ARTS: (
        "Œuvres décrites pour les lecteurs d'écran",
        "Analyse guidée de la composition et des couleurs",
    ),
}

GENERIC_GUIDANCE: tuple[str, ...] = (
    "Contenu structuré avec titres et navigation interne",
    "Glossaire des termes importants",
)


class UsageGuideBuilder:
    """Builds the end-user guide shipped alongside a generated document."""

    def __init__(self, registry: DisciplineRegistry) -> None:
        self._registry = registry

    def build(self, analysis: DocumentAnalysis) -> UsageGuide:
        profile = self._registry.get_profile(analysis.discipline)
        feature_names = [f.name for f in self._registry.get_accessibility_features().values()]

        sections = (
            GuideSection(
                title="Navigation et Accessibilité",
                content=(
                    "Utilisez Tab pour naviguer entre les éléments interactifs",
                    "Le lien d'évitement mène directement au contenu principal",
                    "Barre d'accessibilité : " + ", ".join(feature_names),
                    "Bouton 🔊 pour la lecture vocale du contenu",
                ),
            ),
            GuideSection(
                title="Fonctionnalités Disciplinaires",
                content=DISCIPLINE_GUIDANCE.get(profile.key, GENERIC_GUIDANCE),
            ),
            GuideSection(
                title="Mini-jeux et Pauses Cognitives",
                content=(
                    "Une pause cognitive est proposée au milieu de la leçon",
                    "Les mini-jeux sont adaptés à la discipline "
                    f"({len(self._registry.get_cognitive_breaks(profile.key))} disponibles)",
                    "Ils se jouent entièrement au clavier",
                ),
            ),
            GuideSection(
                title="Personnalisation",
                content=(
                    "Les options d'accessibilité se combinent librement",
                    "Le mode sombre et le contraste élevé réduisent la fatigue visuelle",
                    "La police adaptée à la dyslexie augmente l'espacement",
                ),
            ),
            GuideSection(
                title="Export et Partage",
                content=(
                    "Export PDF accessible avec balisage et ordre de lecture",
                    "Impression optimisée sans éléments interactifs",
                    "Partage via le menu du navigateur",
                ),
            ),
        )
        return UsageGuide(
            title=f"Guide d'utilisation - {profile.name}",
            sections=sections,
            technical_requirements=TechnicalRequirements(
                browsers=("Chrome 90+", "Firefox 88+", "Safari 14+", "Edge 90+"),
                accessibility=("NVDA", "JAWS", "VoiceOver", "Dragon NaturallySpeaking"),
                features=("JavaScript activé", "LocalStorage", "Web Speech API (optionnel)"),
            ),
        )
