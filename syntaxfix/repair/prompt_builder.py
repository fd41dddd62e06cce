"""Builds the instruction prompt sent to the model."""

from syntaxfix.repair.models import ErrorItem, ErrorReport
from syntaxfix.repair.prompt_loader import load_prompt_template


def build_error_list(report: ErrorReport) -> str:
    """One line per error; falls back to the summary when nothing is itemized."""
    if not report.items:
        return report.summary
    return "\n".join(_format_item(item) for item in report.items)


def build_fix_prompt(report: ErrorReport, content: str, template: str | None = None) -> str:
    """Render the fix prompt for ``content`` with every error in ``report``.

    The content is embedded verbatim. ``template`` defaults to the bundled
    fix_prompt.txt.
    """
    if template is None:
        template = load_prompt_template()
    return template.format(
        format_kind=report.format_kind.value,
        error_list=build_error_list(report),
        content=content,
    )


def build_system_prompt(report: ErrorReport, template: str) -> str:
    if not template:
        return ""
    return template.format(format_kind=report.format_kind.value)


def _format_item(item: ErrorItem) -> str:
    if item.line is not None:
        return f"Line {item.line}: {item.message}"
    return item.message
