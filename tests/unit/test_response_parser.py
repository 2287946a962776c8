"""
Tests for extracting content pairs from model output.
"""

import json

import pytest

from app.services.response_parser import extract_json_object, parse_content_pairs
from app.utils.exceptions import ContentValidationError, ResponseParseError
from tests.fixtures.mock_data import mock_ai_response, mock_raw_pairs


class TestExtractJsonObject:
    """Tests for the greedy brace match."""

    def test_returns_bare_object(self):
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_strips_markdown_fence_and_chatter(self):
        text = 'Sure!\n```json\n{"a": {"b": 2}}\n```\nDone.'
        assert extract_json_object(text) == '{"a": {"b": 2}}'

    def test_spans_first_open_to_last_close_brace(self):
        text = 'x {"a": 1} middle {"b": 2} y'
        assert extract_json_object(text) == '{"a": 1} middle {"b": 2}'

    def test_matches_across_newlines(self):
        text = '{\n  "a": 1\n}'
        assert extract_json_object(text) == text

    def test_no_braces_raises(self):
        with pytest.raises(ResponseParseError) as exc_info:
            extract_json_object("I cannot help with that.")
        assert exc_info.value.raw_response == "I cannot help with that."
        assert "No valid JSON object found" in exc_info.value.message

    def test_empty_text_raises(self):
        with pytest.raises(ResponseParseError):
            extract_json_object("")


class TestParseContentPairs:
    """Tests for parse_content_pairs."""

    def test_parses_fenced_response(self):
        pairs = parse_content_pairs(mock_ai_response())
        assert len(pairs) == 13
        assert pairs[0].branch == "CABANG – KEPONG"
        assert pairs[0].facebook_post == "Hantaran Facebook untuk CABANG – KEPONG."
        assert pairs[-1].branch == "CABANG - LABUAN"

    def test_parses_bare_response(self):
        assert len(parse_content_pairs(mock_ai_response(fenced=False))) == 13

    def test_too_few_pairs_rejected(self):
        with pytest.raises(ContentValidationError) as exc_info:
            parse_content_pairs(mock_ai_response(count=12))
        assert exc_info.value.details["received"] == 12

    def test_too_many_pairs_rejected(self):
        with pytest.raises(ContentValidationError):
            parse_content_pairs(mock_ai_response(count=14))

    def test_missing_content_pairs_key_rejected(self):
        with pytest.raises(ContentValidationError) as exc_info:
            parse_content_pairs('{"pairs": []}')
        assert exc_info.value.details["received"] is None

    def test_content_pairs_not_a_list_rejected(self):
        with pytest.raises(ContentValidationError):
            parse_content_pairs('{"contentPairs": "none"}')

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ResponseParseError):
            parse_content_pairs('```json\n{"contentPairs": [,]}\n```')

    def test_pair_missing_tweet_rejected(self):
        raw = mock_raw_pairs()
        del raw[3]["tweet"]
        with pytest.raises(ContentValidationError):
            parse_content_pairs(json.dumps({"contentPairs": raw}))

    def test_pair_with_empty_post_rejected(self):
        raw = mock_raw_pairs()
        raw[0]["facebookPost"] = ""
        with pytest.raises(ContentValidationError):
            parse_content_pairs(json.dumps({"contentPairs": raw}))

    def test_unknown_branch_names_are_kept(self):
        raw = mock_raw_pairs()
        raw[0]["branch"] = "CABANG - KEPONG"
        pairs = parse_content_pairs(json.dumps({"contentPairs": raw}))
        assert pairs[0].branch == "CABANG - KEPONG"
