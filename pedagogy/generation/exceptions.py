class GenerationError(Exception):
    """Raised when an accessible document cannot be generated."""


class TemplateLoadError(GenerationError):
    """Raised when a bundled template cannot be read."""
