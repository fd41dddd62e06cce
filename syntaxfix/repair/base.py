from abc import ABC, abstractmethod


class BaseFixer(ABC):
    """Contract for all syntax-fixing adapters."""

    @abstractmethod
    def fix(self, content: str, error_report: str, model: str) -> str:
        """Ask a model to repair ``content`` and return the corrected document.

        Args:
            content: The malformed JSON or XML text.
            error_report: Serialized error report (``type``, ``message``,
                optional ``allErrors``).
            model: Model name understood by the inference provider.

        Returns:
            The candidate corrected document. It is not validated.

        Raises:
            InputError: if the error report cannot be decoded.
            CollaboratorError: if the inference call fails.
        """
