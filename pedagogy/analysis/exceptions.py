class AnalysisError(Exception):
    """Raised when document analysis fails on an internal fault."""
