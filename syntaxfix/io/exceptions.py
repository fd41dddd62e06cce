class FileAccessError(Exception):
    """Raised when a document cannot be read from or written to disk."""
