"""Per-discipline assistant knowledge and speech-synthesis parameters.

Both tables are serialized into the behaviour script of the generated page.
"""

from pedagogy.registry.models import Discipline

DEFAULT_HINT = "Réfléchissez aux concepts vus en cours"
DEFAULT_SOLUTION = "Solution non disponible"

KNOWLEDGE_BASE: dict[Discipline, dict[str, object]] = {
    Discipline.MATHEMATICS: {
        "hints": {1: "Isolez la variable x en effectuant les opérations inverses"},
        "solutions": {1: "2x + 5 = 13\n2x = 13 - 5\n2x = 8\nx = 4"},
        "help": "Pour résoudre une équation, applique les opérations inverses de chaque côté",
    },
    Discipline.LITERATURE: {
        "hints": {1: "Cherchez les comparaisons, métaphores et répétitions dans le texte"},
        "solutions": {1: "Analyse complète avec identification des figures de style et leur effet"},
        "help": "Pour analyser un texte, identifie le thème, le ton et les procédés stylistiques",
    },
    Discipline.SCIENCE: {
        "hints": {1: "Une hypothèse doit être testable et basée sur l'observation"},
        "solutions": {1: "Hypothèse: Si [condition] alors [prédiction] car [justification théorique]"},
        "help": "La démarche scientifique suit: observation → hypothèse → expérience → conclusion",
    },
}

GENERIC_KNOWLEDGE: dict[str, object] = {
    "hints": {1: "Analysez les éléments clés du problème"},
    "solutions": {1: "Solution détaillée étape par étape"},
    "help": "Décomposez le problème en étapes simples",
}

SPEECH_SETTINGS: dict[str, dict[str, object]] = {
    Discipline.MATHEMATICS.value: {"rate": 0.7, "pitch": 1, "emphasis": "formulas"},
    Discipline.LITERATURE.value: {"rate": 0.9, "pitch": 1.1, "emphasis": "expression"},
    Discipline.SCIENCE.value: {"rate": 0.8, "pitch": 1, "emphasis": "technical-terms"},
    Discipline.LANGUAGES.value: {"rate": 0.8, "pitch": 1.2, "emphasis": "pronunciation"},
    "default": {"rate": 0.9, "pitch": 1},
}


def knowledge_for(discipline: Discipline) -> dict[str, object]:
    return KNOWLEDGE_BASE.get(discipline, GENERIC_KNOWLEDGE)
