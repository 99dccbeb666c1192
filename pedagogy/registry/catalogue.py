"""Static discipline, accessibility and cognitive-break catalogues."""

from pedagogy.registry.models import (
    AccessibilityFeature,
    CognitiveBreak,
    ColorPalette,
    Discipline,
    DisciplineProfile,
    FontHints,
)

DISCIPLINE_PROFILES: tuple[DisciplineProfile, ...] = (
    DisciplineProfile(
        key=Discipline.MATHEMATICS,
        name="Mathématiques",
        icon="🔢",
        colors=ColorPalette(primary="#2E86AB", secondary="#A23B72", accent="#F18F01"),
        fonts=FontHints(
            main="KaTeX_Math, Computer Modern, serif",
            extra={"formulas": "Latin Modern Math, Times New Roman, serif"},
        ),
        tools=("calculatrice", "grapheur", "formulaire", "géogébra"),
        visual_elements=("graphiques", "schémas", "formules", "diagrammes"),
        cognitive_emphasis="logical-reasoning",
    ),
    DisciplineProfile(
        key=Discipline.LITERATURE,
        name="Littérature",
        icon="📚",
        colors=ColorPalette(primary="#6A4C93", secondary="#8B5A2B", accent="#C06C84"),
        fonts=FontHints(
            main="Crimson Text, Georgia, serif",
            extra={"quotes": "Playfair Display, serif"},
        ),
        tools=("dictionnaire", "biographies", "contexte-historique", "analyse-stylistique"),
        visual_elements=("portraits", "manuscrits", "contextes-historiques", "cartes-littéraires"),
        cognitive_emphasis="creative-expression",
    ),
    DisciplineProfile(
        key=Discipline.SCIENCE,
        name="Sciences",
        icon="🔬",
        colors=ColorPalette(primary="#16537e", secondary="#2E8B57", accent="#FF6B35"),
        fonts=FontHints(
            main="Source Sans Pro, Arial, sans-serif",
            extra={"technical": "Fira Code, monospace"},
        ),
        tools=("simulateur", "tableau-périodique", "convertisseur", "calculateur-scientifique"),
        visual_elements=("schémas", "diagrammes", "photos-microscope", "graphiques-données"),
        cognitive_emphasis="analytical-thinking",
    ),
    DisciplineProfile(
        key=Discipline.HISTORY,
        name="Histoire",
        icon="🏛️",
        colors=ColorPalette(primary="#8B4513", secondary="#DAA520", accent="#CD853F"),
        fonts=FontHints(
            main="Merriweather, Times New Roman, serif",
            extra={"dates": "Roboto Mono, monospace"},
        ),
        tools=("chronologie", "cartes-historiques", "documents-époque", "biographies"),
        visual_elements=("cartes", "photos-époque", "documents", "chronologies"),
        cognitive_emphasis="chronological-understanding",
    ),
    DisciplineProfile(
        key=Discipline.GEOGRAPHY,
        name="Géographie",
        icon="🌍",
        colors=ColorPalette(primary="#228B22", secondary="#4682B4", accent="#FF8C00"),
        fonts=FontHints(
            main="Open Sans, Arial, sans-serif",
            extra={"coordinates": "Courier New, monospace"},
        ),
        tools=("cartes-interactives", "atlas", "météo", "coordonnées-gps"),
        visual_elements=("cartes", "photos-satellites", "graphiques-climatiques", "relief-3d"),
        cognitive_emphasis="spatial-reasoning",
    ),
    DisciplineProfile(
        key=Discipline.LANGUAGES,
        name="Langues",
        icon="🗣️",
        colors=ColorPalette(primary="#9932CC", secondary="#FF69B4", accent="#00CED1"),
        fonts=FontHints(
            main="Noto Sans, Arial, sans-serif",
            extra={"phonetic": "Doulos SIL, Times New Roman, serif"},
        ),
        tools=("dictionnaire-phonétique", "conjugueur", "traducteur", "prononciation"),
        visual_elements=("cartes-linguistiques", "symboles-phonétiques", "cultures", "drapeaux"),
        cognitive_emphasis="communication-skills",
    ),
    DisciplineProfile(
        key=Discipline.ARTS,
        name="Arts",
        icon="🎨",
        colors=ColorPalette(primary="#DC143C", secondary="#FFD700", accent="#8A2BE2"),
        fonts=FontHints(
            main="Lato, Arial, sans-serif",
            extra={"artistic": "Dancing Script, cursive"},
        ),
        tools=("palette-couleurs", "techniques", "histoire-art", "galeries"),
        visual_elements=("œuvres", "techniques", "courants-artistiques", "portfolios"),
        cognitive_emphasis="creative-expression",
    ),
    DisciplineProfile(
        key=Discipline.GENERIC,
        name="Multidisciplinaire",
        icon="🎯",
        colors=ColorPalette(primary="#667eea", secondary="#764ba2", accent="#28a745"),
        fonts=FontHints(main="Inter, Arial, sans-serif"),
        tools=("recherche", "synthèse", "mindmapping", "présentation"),
        visual_elements=("diagrammes", "infographies", "présentations", "synthèses"),
        cognitive_emphasis="cross-disciplinary",
    ),
)

ACCESSIBILITY_FEATURES: tuple[AccessibilityFeature, ...] = (
    AccessibilityFeature(
        id="high-contrast",
        name="Contraste élevé",
        description="Contraste WCAG AAA pour tous",
        css_class="high-contrast",
    ),
    AccessibilityFeature(
        id="dark-mode",
        name="Mode sombre",
        description="Interface sombre pour réduire la fatigue oculaire",
        css_class="dark-mode",
    ),
    AccessibilityFeature(
        id="dyslexia-friendly",
        name="Adapté dyslexie",
        description="Police OpenDyslexic et espacement adapté",
        css_class="dyslexia-friendly",
    ),
    AccessibilityFeature(
        id="large-text",
        name="Texte agrandi",
        description="Taille de texte augmentée",
        css_class="large-text",
    ),
    AccessibilityFeature(
        id="simplified-interface",
        name="Interface simplifiée",
        description="Réduction des éléments de distraction",
        css_class="simplified-interface",
    ),
    AccessibilityFeature(
        id="colorblind-friendly",
        name="Daltonisme",
        description="Palette accessible aux daltoniens",
        css_class="colorblind-friendly",
    ),
    AccessibilityFeature(
        id="screen-reader",
        name="Lecteur d'écran",
        description="Optimisé pour NVDA, JAWS, VoiceOver",
        css_class="screen-reader-optimized",
    ),
    AccessibilityFeature(
        id="motor-impairment",
        name="Difficultés motrices",
        description="Navigation 100% clavier, boutons agrandis",
        css_class="motor-friendly",
    ),
)

COGNITIVE_BREAKS: dict[Discipline, tuple[CognitiveBreak, ...]] = {
    Discipline.MATHEMATICS: (
        CognitiveBreak("mental-calculation", "Calcul mental", {"difficulty": "adaptive"}),
        CognitiveBreak("pattern-recognition", "Reconnaissance de motifs", {"content": "sequences"}),
        CognitiveBreak("logic-puzzle", "Puzzle logique", {"elements": "mathematical-concepts"}),
        CognitiveBreak("geometry-puzzle", "Puzzle géométrique", {"shapes": "course-related"}),
    ),
    Discipline.LITERATURE: (
        CognitiveBreak("word-association", "Association de mots", {"vocabulary": "literary-terms"}),
        CognitiveBreak("story-building", "Construction narrative", {"elements": "narrative-techniques"}),
        CognitiveBreak("poetry-rhythm", "Rythme poétique", {"meter": "course-examples"}),
        CognitiveBreak("character-matching", "Correspondance personnages", {"works": "studied-authors"}),
    ),
    Discipline.SCIENCE: (
        CognitiveBreak("element-matching", "Correspondance éléments", {"table": "periodic"}),
        CognitiveBreak("process-ordering", "Ordre des processus", {"steps": "scientific-method"}),
        CognitiveBreak("hypothesis-testing", "Test d'hypothèses", {"scenarios": "course-related"}),
        CognitiveBreak("lab-simulation", "Simulation labo", {"experiments": "virtual"}),
    ),
    Discipline.HISTORY: (
        CognitiveBreak("timeline-builder", "Construction chronologie", {"events": "historical-periods"}),
        CognitiveBreak("cause-effect", "Cause à effet", {"relationships": "historical-events"}),
        CognitiveBreak("historical-figures", "Personnages historiques", {"matching": "periods-actions"}),
        CognitiveBreak("map-exploration", "Exploration cartes", {"territories": "historical-changes"}),
    ),
    Discipline.GEOGRAPHY: (
        CognitiveBreak("map-puzzle", "Puzzle cartographique", {"regions": "world-continents"}),
        CognitiveBreak("climate-matching", "Correspondance climats", {"zones": "geographical-features"}),
        CognitiveBreak("capital-cities", "Capitales", {"countries": "world-regions"}),
        CognitiveBreak("relief-identification", "Identification relief", {"features": "topographical"}),
    ),
    Discipline.LANGUAGES: (
        CognitiveBreak("vocabulary-cards", "Cartes vocabulaire", {"words": "lesson-specific"}),
        CognitiveBreak("pronunciation-game", "Jeu prononciation", {"sounds": "phonetic-focus"}),
        CognitiveBreak("grammar-puzzle", "Puzzle grammaire", {"rules": "lesson-grammar"}),
        CognitiveBreak("cultural-matching", "Correspondance culturelle", {"elements": "target-culture"}),
    ),
    Discipline.ARTS: (
        CognitiveBreak("color-harmony", "Harmonie couleurs", {"palettes": "artistic-movements"}),
        CognitiveBreak("style-recognition", "Reconnaissance styles", {"artworks": "famous-painters"}),
        CognitiveBreak("technique-matching", "Correspondance techniques", {"methods": "artistic-processes"}),
        CognitiveBreak("composition-analysis", "Analyse composition", {"elements": "visual-principles"}),
    ),
    Discipline.GENERIC: (
        CognitiveBreak("memory-cards", "Cartes mémoire", {"content": "key-concepts"}),
        CognitiveBreak("concept-mapping", "Carte conceptuelle", {"relations": "course-connections"}),
        CognitiveBreak("quiz-adaptive", "Quiz adaptatif", {"questions": "generated-from-content"}),
        CognitiveBreak("brainstorming", "Brainstorming", {"topics": "lesson-themes"}),
    ),
}
