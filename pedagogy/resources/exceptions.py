class QueryFormatError(ValueError):
    """Raised when resource keywords cannot be turned into a query string."""
