"""Unit tests for TranslationService with a mocked Bedrock runtime."""

import pytest

from src.utils.exceptions import InvalidModelResponseException, TranslationException


class TestTranslateTermsSuccess:

    def test_translates_terms(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("house\ncar\ncomputer")

        result = translation_service.translate_terms("pt-BR", "en-US", ["casa", "carro", "computador"])

        assert result == ["house", "car", "computer"]
        bedrock_runtime.converse.assert_called_once()

    def test_translates_single_term(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("olá", request_id="request-456")

        assert translation_service.translate_terms("en-US", "pt-BR", ["hello"]) == ["olá"]

    def test_drops_blank_lines(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("good\n\nday\n")

        assert translation_service.translate_terms("pt-BR", "en-US", ["bom", "dia"]) == ["good", "day"]

    def test_works_without_response_metadata(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("test", request_id=None)

        assert translation_service.translate_terms("pt-BR", "en-US", ["teste"]) == ["test"]

    def test_returns_mismatched_count_as_is(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("house\ncar")

        result = translation_service.translate_terms("pt-BR", "en-US", ["casa", "carro", "computador"])

        assert result == ["house", "car"]

    def test_empty_terms_with_empty_response(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("")

        assert translation_service.translate_terms("pt-BR", "en-US", []) == []

    def test_sends_prompt_and_inference_config(self, translation_service, bedrock_runtime, converse_response):
        bedrock_runtime.converse.return_value = converse_response("house")

        translation_service.translate_terms("pt-BR", "en-US", ["casa"])

        kwargs = bedrock_runtime.converse.call_args.kwargs
        assert kwargs["modelId"] == "anthropic.claude-3-sonnet-20240229-v1:0"
        assert kwargs["messages"] == [
            {"role": "user", "content": [{"text": "Translate the following terms:\n\ncasa\n"}]}
        ]
        assert "'pt-BR'" in kwargs["system"][0]["text"]
        assert "'en-US'" in kwargs["system"][0]["text"]
        assert kwargs["inferenceConfig"] == {"maxTokens": 4000, "temperature": 0.1, "topP": 0.9}


class TestTranslateTermsErrors:

    def test_wraps_client_failure(self, translation_service, bedrock_runtime):
        bedrock_runtime.converse.side_effect = RuntimeError("AWS Bedrock error")

        with pytest.raises(TranslationException, match="Translation failed: AWS Bedrock error") as exc_info:
            translation_service.translate_terms("pt-BR", "en-US", ["casa", "carro"])

        assert not isinstance(exc_info.value, InvalidModelResponseException)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.parametrize(
        "response",
        [
            {},
            {"output": {}},
            {"output": {"message": {"content": []}}},
            {"output": {"message": {"content": [{}]}}},
        ],
        ids=["no-output", "no-message", "no-content-blocks", "block-without-text"],
    )
    def test_invalid_model_response(self, translation_service, bedrock_runtime, response):
        bedrock_runtime.converse.return_value = response

        with pytest.raises(InvalidModelResponseException, match="Translation failed: Invalid model response"):
            translation_service.translate_terms("pt-BR", "en-US", ["teste"])
