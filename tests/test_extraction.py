"""Tests for balanced JSON substring extraction."""

import time

from aikit.models import ExtractionStage
from aikit.utils.extraction import extract_first_json, extract_json_from_mixed_content


class TestExtractFirstJson:
    def test_object_in_prose(self):
        text = 'Here is the result:\n{"name": "test", "value": 42}\nEnd of result.'
        candidate = extract_first_json(text)
        assert candidate.text == '{"name": "test", "value": 42}'
        assert candidate.stage == ExtractionStage.balanced_extraction

    def test_offsets_slice_source(self):
        text = 'prefix [1, [2, 3]] suffix'
        candidate = extract_first_json(text)
        assert text[candidate.start:candidate.end] == candidate.text == "[1, [2, 3]]"
        assert len(candidate) == len("[1, [2, 3]]")

    def test_brackets_inside_strings_ignored(self):
        text = 'Answer: {"a": "}", "b": "[x", "c": {"d": "]"}} trailing }'
        assert extract_first_json(text).text == '{"a": "}", "b": "[x", "c": {"d": "]"}}'

    def test_escaped_quotes_inside_strings(self):
        text = r'x {"a": "say \"}\" now", "b": "back\\"} y'
        assert extract_first_json(text).text == r'{"a": "say \"}\" now", "b": "back\\"}'

    def test_first_match_not_longest(self):
        text = '{"a": 1} and then {"b": 2, "c": [1, 2, 3, 4, 5]}'
        assert extract_first_json(text).text == '{"a": 1}'

    def test_array_before_object(self):
        text = 'list [1, 2] then {"a": 1}'
        assert extract_first_json(text).text == "[1, 2]"

    def test_mismatch_abandons_and_rescans(self):
        text = 'broken {] then {"ok": true}'
        assert extract_first_json(text).text == '{"ok": true}'

    def test_mismatch_inside_nesting_rescans_from_next_opener(self):
        text = '{"a": [1, 2} [3]'
        assert extract_first_json(text).text == "[3]"

    def test_unterminated_returns_none(self):
        assert extract_first_json('{"summary": "room", "objects": ["chair"') is None

    def test_no_brackets(self):
        assert extract_first_json("This is just text with no JSON structure") is None

    def test_empty(self):
        assert extract_first_json("") is None

    def test_braces_inside_quoted_prose_skipped(self):
        text = 'The model said "use {placeholder} here" and returned {"a": 1}'
        assert extract_first_json(text).text == '{"a": 1}'

    def test_unbalanced_quote_in_prose_hides_later_brackets(self):
        assert extract_first_json('He said "look below: {"a": 1}') is None

    def test_stray_close_before_span_ignored(self):
        text = 'Step 1) done ] then {"a": [1]}'
        assert extract_first_json(text).text == '{"a": [1]}'

    def test_mismatch_heavy_input_is_linear(self):
        n = 20_000
        text = "{" * n + "]" + ' {"a": 1}'
        started = time.perf_counter()
        candidate = extract_first_json(text)
        elapsed = time.perf_counter() - started
        assert candidate.text == '{"a": 1}'
        assert candidate.start == n + 2
        assert elapsed < 1.0

    def test_source_not_mutated(self):
        text = 'pre {"a": [1]} post'
        original = str(text)
        extract_first_json(text)
        assert text == original


class TestExtractJsonFromMixedContent:
    def test_valid_json(self):
        s = '{"id":"test","name":"Test Item"}'
        assert extract_json_from_mixed_content(f"Here's your data: {s} - that's all!") == s

    def test_no_json(self):
        assert extract_json_from_mixed_content("This is just text with no JSON structure") is None

    def test_with_markdown(self):
        s = '{"id":"test","name":"Test Item"}'
        assert extract_json_from_mixed_content(f"```json\n{s}\n```") == s
