"""Unit tests for model response parsing."""

import logging

import pytest

from src.core.response_parser import extract_translated_content, parse_translated_terms
from src.utils.exceptions import InvalidModelResponseException


class TestExtractTranslatedContent:

    def test_returns_stripped_text_of_first_block(self, converse_response):
        response = converse_response("  house\ncar \n")
        response["output"]["message"]["content"].append({"text": "ignored"})

        assert extract_translated_content(response) == "house\ncar"

    def test_empty_text_is_valid(self, converse_response):
        assert extract_translated_content(converse_response("")) == ""

    @pytest.mark.parametrize(
        "response",
        [
            None,
            {},
            {"output": None},
            {"output": {}},
            {"output": {"message": None}},
            {"output": {"message": {"content": []}}},
            {"output": {"message": {"content": [{}]}}},
            {"output": {"message": {"content": [{"text": None}]}}},
        ],
        ids=["none", "empty", "null-output", "no-message", "null-message",
             "no-content", "block-without-text", "null-text"],
    )
    def test_rejects_responses_without_text(self, response):
        with pytest.raises(InvalidModelResponseException, match="Invalid model response"):
            extract_translated_content(response)


class TestParseTranslatedTerms:

    def test_preserves_line_order(self):
        assert parse_translated_terms("house\ncar\ncomputer", 3) == ["house", "car", "computer"]

    def test_drops_blank_lines(self):
        assert parse_translated_terms("good\n\nday\n", 2) == ["good", "day"]

    def test_trims_each_line(self):
        assert parse_translated_terms("  good \n\t day\t", 2) == ["good", "day"]

    def test_count_mismatch_returns_all_lines_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.core.response_parser"):
            result = parse_translated_terms("house\ncar", 3)

        assert result == ["house", "car"]
        assert any("does not match" in record.getMessage() for record in caplog.records)

    def test_matching_count_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.core.response_parser"):
            parse_translated_terms("olá", 1)

        assert not caplog.records

    def test_empty_content_yields_empty_list(self):
        assert parse_translated_terms("", 0) == []
