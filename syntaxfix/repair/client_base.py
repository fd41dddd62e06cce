from abc import ABC, abstractmethod

from syntaxfix.repair.models import GenerationRequest, GenerationResponse


class InferenceClient(ABC):
    """Contract for provider-specific inference clients."""

    @abstractmethod
    def generate(self, request: GenerationRequest) -> GenerationResponse:
        """Run one non-streaming generation and return the raw reply text.

        Raises:
            CollaboratorNetworkError: on transport failure or timeout.
            CollaboratorError: on a non-success status or an undecodable reply.
        """
