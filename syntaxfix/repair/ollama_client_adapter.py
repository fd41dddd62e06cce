"""Inference client for a local Ollama server (``/api/generate``)."""

from typing import Any

import httpx

from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.exceptions import CollaboratorError, CollaboratorNetworkError
from syntaxfix.repair.models import GenerationRequest, GenerationResponse, ModelStatus

_UNBOUNDED_OUTPUT = -1


class OllamaClientAdapter(InferenceClient):
    """Talks to Ollama's native HTTP API.

    A fresh ``httpx.Client`` is opened for each call, so instances hold no
    connection state between requests.
    """

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:11434",
        timeout_seconds: int = 300,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        payload = self._build_generate_payload(request)
        try:
            with self._open_client() as client:
                response = client.post("/api/generate", json=payload)
        except httpx.RequestError as exc:
            raise CollaboratorNetworkError(f"Failed to call Ollama API: {exc}") from exc

        if not response.is_success:
            raise CollaboratorError(f"Ollama API error: HTTP {response.status_code}")
        try:
            body = response.json()
        except ValueError as exc:
            raise CollaboratorError(f"Failed to parse Ollama response: {exc}") from exc

        text = body.get("response") if isinstance(body, dict) else None
        return GenerationResponse(response=text if isinstance(text, str) else "")

    def list_models(self) -> tuple[str, ...]:
        """Names of the models installed on the server.

        Raises:
            CollaboratorNetworkError: if the server cannot be reached.
            CollaboratorError: on a non-success status or an undecodable reply.
        """
        try:
            with self._open_client() as client:
                response = client.get("/api/tags")
        except httpx.RequestError as exc:
            raise CollaboratorNetworkError(f"Failed to list models: {exc}") from exc

        if not response.is_success:
            raise CollaboratorError(f"Ollama API error: HTTP {response.status_code}")
        try:
            body = response.json()
        except ValueError as exc:
            raise CollaboratorError(f"Failed to parse Ollama response: {exc}") from exc

        models = body.get("models") if isinstance(body, dict) else None
        if not isinstance(models, list):
            return ()
        return tuple(
            entry["name"]
            for entry in models
            if isinstance(entry, dict) and isinstance(entry.get("name"), str)
        )

    def check_status(self) -> ModelStatus:
        """Report whether the server answers and which models it has. Never raises."""
        try:
            models = self.list_models()
        except CollaboratorNetworkError as exc:
            return ModelStatus(available=False, error=f"Ollama not reachable: {exc}")
        except CollaboratorError as exc:
            return ModelStatus(available=False, error=str(exc))
        return ModelStatus(available=True, models=models)

    def is_model_available(self, model: str) -> bool:
        # Substring match, so "llama3" also matches "llama3:latest".
        return any(model in name for name in self.list_models())

    def pull_model(self, model: str) -> str:
        """Download ``model`` onto the server and wait for completion.

        Raises:
            CollaboratorNetworkError: if the server cannot be reached.
            CollaboratorError: if the server refuses the pull.
        """
        try:
            with self._open_client() as client:
                response = client.post("/api/pull", json={"model": model, "stream": False})
        except httpx.RequestError as exc:
            raise CollaboratorNetworkError(f"Failed to pull model: {exc}") from exc

        if not response.is_success:
            raise CollaboratorError(f"Failed to pull model: {_error_detail(response)}")
        return f"Successfully pulled model: {model}"

    def _open_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )

    @staticmethod
    def _build_generate_payload(request: GenerationRequest) -> dict[str, Any]:
        options = request.options
        num_predict = (
            options.max_output_tokens
            if options.max_output_tokens is not None
            else _UNBOUNDED_OUTPUT
        )
        payload: dict[str, Any] = {
            "model": request.model,
            "prompt": request.prompt,
            "stream": request.stream,
            "options": {
                "num_ctx": options.context_window,
                "num_predict": num_predict,
                "temperature": options.temperature,
                "top_p": options.top_p,
                "repeat_penalty": options.repeat_penalty,
                "stop": list(options.stop_sequences),
            },
        }
        if request.system_prompt:
            payload["system"] = request.system_prompt
        return payload


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP {response.status_code}"
