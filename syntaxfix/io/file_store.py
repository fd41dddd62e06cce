from pathlib import Path

from syntaxfix.io.exceptions import FileAccessError


class FileStore:
    """Reads and writes documents as UTF-8 text."""

    def read_text(self, path: Path) -> str:
        """Read a document from disk.

        Raises:
            FileAccessError: if the file is missing or unreadable.
        """
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(f"Failed to read file: {exc}") from exc

    def write_text(self, path: Path, content: str) -> str:
        """Write a document to disk, replacing any existing file."""
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileAccessError(f"Failed to write file: {exc}") from exc
        return f"Successfully saved to {path}"
