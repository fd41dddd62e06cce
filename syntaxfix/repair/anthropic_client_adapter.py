from typing import Any

import anthropic
import httpx

from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.exceptions import CollaboratorError, CollaboratorNetworkError
from syntaxfix.repair.models import GenerationRequest, GenerationResponse

DEFAULT_MAX_TOKENS = 16000


class AnthropicClientAdapter(InferenceClient):
    """Inference client for Claude models through the Anthropic Messages API.

    The Messages API requires an output limit, so an unbounded request is sent
    with ``max_tokens`` instead.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout_seconds,
        )
        self._max_tokens = max_tokens

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        try:
            message = self._client.messages.create(**self._build_params(request))
        except (anthropic.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise CollaboratorNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except anthropic.APIError as exc:
            raise CollaboratorError(
                f"AI provider API error: {exc}"
            ) from exc

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise CollaboratorError("AI returned empty response")
        return GenerationResponse(response=text)

    def _build_params(self, request: GenerationRequest) -> dict[str, Any]:
        options = request.options
        params: dict[str, Any] = {
            "model": request.model,
            "max_tokens": options.max_output_tokens or self._max_tokens,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": options.temperature,
        }
        if request.system_prompt:
            params["system"] = request.system_prompt
        if options.stop_sequences:
            params["stop_sequences"] = list(options.stop_sequences)
        return params
