"""Keyword tables driving the heuristic classification.

All entries are lowercase; matching is done against lowercased text.
"""

from pedagogy.analysis.models import ContentType, Level
from pedagogy.registry.models import Discipline

DISCIPLINE_KEYWORDS: dict[Discipline, tuple[str, ...]] = {
    Discipline.MATHEMATICS: (
        "équation", "formule", "calcul", "théorème", "démonstration", "fonction",
        "géométrie", "algèbre", "probabilité", "statistique", "dérivée", "intégrale",
        "nombre", "fraction", "pourcentage", "graphique", "courbe", "coordonnées",
    ),
    Discipline.LITERATURE: (
        "auteur", "œuvre", "roman", "poésie", "théâtre", "personnage", "narrateur",
        "métaphore", "allégorie", "symbolisme", "style", "genre", "siècle",
        "littéraire", "analyse", "commentaire", "dissertation", "citation",
    ),
    Discipline.SCIENCE: (
        "expérience", "hypothèse", "observation", "protocole", "résultat", "conclusion",
        "physique", "chimie", "biologie", "atome", "molécule", "cellule",
        "énergie", "force", "réaction", "évolution", "écosystème", "adn",
    ),
    Discipline.HISTORY: (
        "siècle", "époque", "période", "guerre", "révolution", "roi", "empereur",
        "civilisation", "société", "politique", "économie", "culture",
        "chronologie", "événement", "personnage historique", "date",
    ),
    Discipline.GEOGRAPHY: (
        "continent", "pays", "région", "climat", "relief", "montagne", "fleuve",
        "océan", "population", "ville", "capitale", "territoire",
        "carte", "coordonnées", "latitude", "longitude", "géographique",
    ),
    Discipline.LANGUAGES: (
        "grammaire", "vocabulaire", "conjugaison", "syntaxe", "phonétique",
        "prononciation", "accent", "langue", "traduction", "expression",
        "communication", "oral", "écrit", "dialogue", "conversation",
    ),
    Discipline.ARTS: (
        "peinture", "sculpture", "dessin", "couleur", "composition", "technique",
        "artiste", "œuvre", "style", "mouvement", "esthétique", "créativité",
        "expression", "forme", "lumière", "perspective", "art",
    ),
}

# Checked in this order; the first list with a hit wins.
LEVEL_INDICATORS: tuple[tuple[Level, tuple[str, ...]], ...] = (
    (Level.PRIMAIRE, ("cp", "ce1", "ce2", "cm1", "cm2", "élémentaire", "cycle 2", "cycle 3")),
    (
        Level.COLLEGE,
        ("6ème", "5ème", "4ème", "3ème", "sixième", "cinquième", "quatrième", "troisième", "cycle 4"),
    ),
    (Level.LYCEE, ("seconde", "première", "terminale", "2nde", "1ère", "tale", "baccalauréat", "bac")),
    (Level.SUPERIEUR, ("université", "master", "licence", "doctorat", "l1", "l2", "l3", "m1", "m2")),
    (
        Level.PROFESSIONNEL,
        ("cap", "bep", "bac pro", "bts", "formation professionnelle", "apprentissage"),
    ),
)

# Upper bounds of the complexity score, checked in order.
COMPLEXITY_THRESHOLDS: tuple[tuple[float, Level], ...] = (
    (30, Level.PRIMAIRE),
    (60, Level.COLLEGE),
    (80, Level.LYCEE),
)

CONTENT_TYPE_MARKERS: tuple[tuple[ContentType, tuple[str, ...]], ...] = (
    (ContentType.EXERCICES, ("exercice", "question", "calculer")),
    (ContentType.EVALUATION, ("évaluation", "contrôle", "test")),
    (ContentType.PROJET, ("projet", "réaliser", "créer")),
)

PEDAGOGICAL_OBJECTIVES: dict[Discipline, dict[str, str]] = {
    Discipline.MATHEMATICS: {
        "cognitif": "Comprendre et appliquer les concepts mathématiques",
        "méthodologique": "Développer le raisonnement logique et la résolution de problèmes",
        "transversal": "Utiliser les mathématiques dans des contextes variés",
    },
    Discipline.LITERATURE: {
        "cognitif": "Analyser et interpréter les textes littéraires",
        "méthodologique": "Développer l'expression écrite et orale",
        "transversal": "Cultiver la sensibilité artistique et l'esprit critique",
    },
    Discipline.SCIENCE: {
        "cognitif": "Comprendre les phénomènes naturels et les lois scientifiques",
        "méthodologique": "Maîtriser la démarche scientifique",
        "transversal": "Développer l'esprit d'observation et d'analyse",
    },
}

GENERIC_OBJECTIVES: dict[str, str] = {
    "cognitif": "Acquérir les connaissances de base",
    "méthodologique": "Développer les compétences méthodologiques",
    "transversal": "Favoriser l'autonomie et la curiosité",
}

# Visual categories without an entry here are matched on their own name.
VISUAL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "graphiques": ("graphique", "courbe", "diagramme", "histogramme"),
    "schémas": ("schéma", "figure", "illustration", "représentation"),
    "formules": ("formule", "équation", "calcul", "expression"),
    "portraits": ("auteur", "écrivain", "personnage", "portrait"),
    "cartes": ("carte", "géographie", "territoire", "région"),
    "photos": ("photo", "image", "illustration", "document"),
}

EXERCISE_PATTERNS: dict[Discipline, tuple[str, ...]] = {
    Discipline.MATHEMATICS: ("calculer", "résoudre", "démontrer", "construire", "tracer"),
    Discipline.LITERATURE: ("analyser", "commenter", "rédiger", "expliquer", "interpréter"),
    Discipline.SCIENCE: ("observer", "expérimenter", "conclure", "hypothèse", "protocole"),
}

GENERIC_EXERCISE_PATTERNS: tuple[str, ...] = ("question", "exercice", "activité")

TRANSVERSAL_SKILLS: dict[str, tuple[str, ...]] = {
    "lecture": ("lire", "comprendre", "analyser"),
    "raisonnement": ("réfléchir", "déduire", "logique"),
    "créativité": ("créer", "imaginer", "inventer"),
    "communication": ("expliquer", "présenter", "argumenter"),
    "autonomie": ("rechercher", "organiser", "planifier"),
}
