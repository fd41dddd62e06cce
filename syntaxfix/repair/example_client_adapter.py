"""Example inference client adapter.

Use this module as a reference when implementing new provider adapters.
Implement InferenceClient and register the provider in FixerFactory.
"""

from typing import ClassVar

from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.models import GenerationRequest, GenerationResponse


class ExampleClientAdapter(InferenceClient):
    """Example adapter that returns a fixed reply shaped like a reasoning model's.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "<think>The input needs its syntax repaired.</think>\n"
        "Here is the corrected document:\n"
        "```json\n"
        '{"fixed": true}\n'
        "```"
    )

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        _ = request
        return GenerationResponse(response=self.DEFAULT_RESPONSE)
