from typing import Any

import httpx
import openai

from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.exceptions import CollaboratorError, CollaboratorNetworkError
from syntaxfix.repair.models import GenerationRequest, GenerationResponse


class OpenAIClientAdapter(InferenceClient):
    """Inference client for hosted providers speaking the OpenAI chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        try:
            response = self._client.chat.completions.create(**self._build_params(request))
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise CollaboratorNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise CollaboratorError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise CollaboratorError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise CollaboratorError("AI returned empty response")
        return GenerationResponse(response=content)

    @staticmethod
    def _build_params(request: GenerationRequest) -> dict[str, Any]:
        options = request.options
        messages = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})

        params: dict[str, Any] = {
            "model": request.model,
            "messages": messages,
            "temperature": options.temperature,
            "top_p": options.top_p,
        }
        if options.max_output_tokens is not None:
            params["max_tokens"] = options.max_output_tokens
        if options.stop_sequences:
            params["stop"] = list(options.stop_sequences)
        return params
