"""Tests for the response normalizer (reasoning, fences, span extraction)."""

from syntaxfix.repair.models import FormatKind
from syntaxfix.repair.response_normalizer import (
    extract_document,
    normalize_response,
    strip_code_fences,
    strip_reasoning,
)


class TestStripReasoning:
    def test_keeps_text_after_closing_marker(self) -> None:
        assert strip_reasoning("<think>plan</think>answer") == "answer"

    def test_anchors_on_last_closing_marker(self) -> None:
        text = "<think>a</think>middle<think>b</think> final"
        assert strip_reasoning(text) == " final"

    def test_closing_marker_without_opening_marker(self) -> None:
        assert strip_reasoning("stray reasoning</think>{}") == "{}"

    def test_without_marker_is_unchanged(self) -> None:
        assert strip_reasoning('{"a": 1}') == '{"a": 1}'

    def test_marker_at_end_leaves_empty_text(self) -> None:
        assert strip_reasoning("<think>only thinking</think>") == ""


class TestStripCodeFences:
    def test_returns_lines_between_paired_fences(self) -> None:
        text = "Here you go:\n```json\n{\n  \"a\": 1\n}\n```\nHope this helps."
        assert strip_code_fences(text) == '{\n  "a": 1\n}'

    def test_plain_fence_without_language(self) -> None:
        assert strip_code_fences("```\n<a/>\n```") == "<a/>"

    def test_indented_fence_lines_are_markers(self) -> None:
        assert strip_code_fences("   ```xml\n<a/>\n   ```") == "<a/>"

    def test_concatenates_multiple_fenced_blocks(self) -> None:
        text = "```\nfirst\n```\nprose\n```\nsecond\n```"
        assert strip_code_fences(text) == "first\nsecond"

    def test_without_fences_is_identity(self) -> None:
        text = "line one\r\nline two\n\n"
        assert strip_code_fences(text) == text

    def test_unclosed_fence_keeps_remaining_lines(self) -> None:
        assert strip_code_fences("```json\n{\"a\": 1}") == '{"a": 1}'

    def test_fence_with_no_content_drops_marker_lines(self) -> None:
        text = '{"a": 1}\n```\n```'
        assert strip_code_fences(text) == '{"a": 1}'

    def test_inline_backticks_do_not_toggle(self) -> None:
        text = "use ```json``` fences\n{}"
        assert strip_code_fences(text) == text

    def test_drops_carriage_returns(self) -> None:
        assert strip_code_fences("```\r\n{}\r\n```\r\n") == "{}"


class TestExtractJson:
    def test_object_surrounded_by_noise(self) -> None:
        text = 'noise {"a":[1,2]} trailing'
        assert extract_document(text, FormatKind.JSON) == '{"a":[1,2]}'

    def test_nested_arrays(self) -> None:
        assert extract_document("pre [1,[2,3],4] post", FormatKind.JSON) == "[1,[2,3],4]"

    def test_first_opener_decides_bracket_type(self) -> None:
        text = 'result: [{"a": 1}, {"b": 2}] done'
        assert extract_document(text, FormatKind.JSON) == '[{"a": 1}, {"b": 2}]'

    def test_stops_at_first_balanced_value(self) -> None:
        text = '{"a": 1} {"b": 2}'
        assert extract_document(text, FormatKind.JSON) == '{"a": 1}'

    def test_unterminated_opener_is_unchanged(self) -> None:
        assert extract_document("{ unterminated", FormatKind.JSON) == "{ unterminated"

    def test_no_opener_is_unchanged(self) -> None:
        assert extract_document("no json here", FormatKind.JSON) == "no json here"

    def test_other_bracket_type_is_ignored_for_depth(self) -> None:
        text = '{"a": [1, 2}'
        # Only braces are counted once "{" opened the span.
        assert extract_document(text, FormatKind.JSON) == '{"a": [1, 2}'

    def test_braces_inside_string_literals_are_counted(self) -> None:
        # Quote context is not tracked: the "}" inside the string closes the
        # span early. Pinned as current behavior.
        text = '{"text": "a } b", "n": 1}'
        assert extract_document(text, FormatKind.JSON) == '{"text": "a }'


class TestExtractXml:
    def test_span_from_first_lt_to_last_gt(self) -> None:
        text = "garbage <root><a/></root> more"
        assert extract_document(text, FormatKind.XML) == "<root><a/></root>"

    def test_keeps_declaration_and_comments(self) -> None:
        text = 'Sure!\n<?xml version="1.0"?>\n<root/>\n<!-- end -->\nThanks'
        assert extract_document(text, FormatKind.XML) == (
            '<?xml version="1.0"?>\n<root/>\n<!-- end -->'
        )

    def test_no_tags_is_unchanged(self) -> None:
        assert extract_document("plain text", FormatKind.XML) == "plain text"

    def test_gt_before_lt_is_unchanged(self) -> None:
        assert extract_document("a > b < c", FormatKind.XML) == "a > b < c"


class TestNormalizeResponse:
    def test_reasoning_and_fenced_json(self) -> None:
        raw = '<think>plan</think>```json\n{"x":1}\n```'
        assert normalize_response(raw, FormatKind.JSON) == '{"x":1}'

    def test_fenced_xml_with_prose(self) -> None:
        raw = (
            "<think>\nThe closing tag is wrong.\n</think>\n\n"
            "Here is the fixed XML:\n```xml\n<root>\n  <a>1</a>\n</root>\n```\n"
            "Let me know if you need anything else."
        )
        assert normalize_response(raw, FormatKind.XML) == "<root>\n  <a>1</a>\n</root>"

    def test_unfenced_json_with_prose(self) -> None:
        raw = 'The corrected JSON is:\n\n{"a": [1, 2, 3]}\n\nAll errors fixed.'
        assert normalize_response(raw, FormatKind.JSON) == '{"a": [1, 2, 3]}'

    def test_falls_back_to_trimmed_text(self) -> None:
        raw = "<think>x</think>\n  sorry, I cannot help  \n"
        assert normalize_response(raw, FormatKind.JSON) == "sorry, I cannot help"

    def test_empty_response(self) -> None:
        assert normalize_response("", FormatKind.XML) == ""

    def test_is_idempotent_on_normalized_json(self) -> None:
        once = normalize_response('<think>t</think>```\n{"a": {"b": [1]}}\n```', FormatKind.JSON)
        assert normalize_response(once, FormatKind.JSON) == once

    def test_is_idempotent_on_normalized_xml(self) -> None:
        once = normalize_response("ok: <r><c/></r> done", FormatKind.XML)
        assert normalize_response(once, FormatKind.XML) == once

    def test_preserves_inner_whitespace(self) -> None:
        raw = '```json\n{\n    "a": 1,\n    "b": 2\n}\n```'
        assert normalize_response(raw, FormatKind.JSON) == '{\n    "a": 1,\n    "b": 2\n}'
