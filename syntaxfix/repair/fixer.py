"""AI-powered JSON/XML syntax fixer."""

from pathlib import Path

from syntaxfix.logging.logger import Log
from syntaxfix.repair.base import BaseFixer
from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.error_report import parse_error_report
from syntaxfix.repair.exceptions import CollaboratorError
from syntaxfix.repair.models import ErrorReport, GenerationOptions, GenerationRequest
from syntaxfix.repair.prompt_builder import build_fix_prompt, build_system_prompt
from syntaxfix.repair.prompt_loader import load_prompt_template
from syntaxfix.repair.response_normalizer import normalize_response


class Fixer(BaseFixer):
    """Repairs malformed JSON/XML using an inference provider.

    Holds configuration only; every ``fix`` call is independent.
    """

    def __init__(
        self,
        *,
        client: InferenceClient,
        context_window: int = 32768,
        prompt_template_path: Path | None = None,
        system_prompt_template: str = "",
    ) -> None:
        self._client = client
        self._options = GenerationOptions(context_window=context_window)
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt_template = system_prompt_template

    def fix(self, content: str, error_report: str, model: str) -> str:
        """Repair ``content`` and return the extracted corrected document."""
        report = parse_error_report(error_report)
        request = self._build_request(report, content, model)
        Log.debug(f"Fix prompt:\n{request.prompt}")

        try:
            raw_response = self._client.generate(request).response
        except CollaboratorError as exc:
            Log.error(f"Inference call failed for model {model}: {exc}")
            raise
        Log.debug(f"AI raw response:\n{raw_response}")

        fixed = normalize_response(raw_response, report.format_kind)
        Log.info(
            f"Fix complete: {report.format_kind.value}, {len(fixed)} chars extracted "
            f"from {len(raw_response)} char response"
        )
        return fixed

    def _build_request(self, report: ErrorReport, content: str, model: str) -> GenerationRequest:
        return GenerationRequest(
            model=model,
            prompt=build_fix_prompt(report, content, self._prompt_template),
            options=self._options,
            system_prompt=build_system_prompt(report, self._system_prompt_template),
        )
