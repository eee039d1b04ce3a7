class MalformedTableError(Exception):
    """Raised when a page has the table marker but too few lines for the header row."""
