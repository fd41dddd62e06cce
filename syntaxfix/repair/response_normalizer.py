"""Extracts the corrected document from a free-form model reply.

The reply passes through four stages, each a best-effort text transform that
leaves its input unchanged when it finds nothing to do:

  1. drop a reasoning preamble ending in ``</think>``
  2. unwrap markdown code fences
  3. cut the first JSON value / XML span out of surrounding prose
  4. trim whitespace

None of the stages raise; a reply the heuristics cannot narrow comes back
trimmed and otherwise intact.
"""

import re

from syntaxfix.repair.models import FormatKind

REASONING_CLOSE_MARKER = "</think>"
FENCE_MARKER = "```"

_JSON_OPENER = re.compile(r"[{\[]")
_JSON_CLOSERS = {"{": "}", "[": "]"}


def normalize_response(raw: str, format_kind: FormatKind) -> str:
    """Turn a raw model reply into the candidate corrected document."""
    text = strip_reasoning(raw)
    text = strip_code_fences(text)
    text = extract_document(text, format_kind)
    return text.strip()


def strip_reasoning(text: str) -> str:
    """Keep only what follows the last ``</think>`` marker, if any."""
    marker_idx = text.rfind(REASONING_CLOSE_MARKER)
    if marker_idx == -1:
        return text
    return text[marker_idx + len(REASONING_CLOSE_MARKER):]


def strip_code_fences(text: str) -> str:
    """Return the fenced block contents, or drop stray fence lines.

    Fence lines toggle the inside-block state and are never kept. When no line
    was ever collected inside a block, every other line survives instead.
    """
    if FENCE_MARKER not in text:
        return text

    lines = _split_lines(text)
    inside_fence = False
    fenced_lines: list[str] = []
    for line in lines:
        if _is_fence_line(line):
            inside_fence = not inside_fence
        elif inside_fence:
            fenced_lines.append(line)

    if fenced_lines:
        return "\n".join(fenced_lines)
    return "\n".join(line for line in lines if not _is_fence_line(line))


def extract_document(text: str, format_kind: FormatKind) -> str:
    """Cut the document span for ``format_kind`` out of ``text``.

    Returns ``text`` unchanged when no complete span can be found.
    """
    trimmed = text.strip()
    if format_kind is FormatKind.JSON:
        span = _json_span(trimmed)
    else:
        span = _xml_span(trimmed)
    return span if span is not None else text


def _json_span(text: str) -> str | None:
    # Bracket depth only: quotes are not tracked, so a brace inside a string
    # literal counts like any other.
    match = _JSON_OPENER.search(text)
    if match is None:
        return None
    start = match.start()
    opener = match.group()
    closer = _JSON_CLOSERS[opener]

    depth = 0
    for idx in range(start, len(text)):
        char = text[idx]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return text[start:idx + 1]
    return None


def _xml_span(text: str) -> str | None:
    start = text.find("<")
    end = text.rfind(">")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start:end + 1]


def _is_fence_line(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


def _split_lines(text: str) -> list[str]:
    # Splits on "\n" only; a trailing "\r" is dropped from each line.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
