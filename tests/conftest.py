"""Shared fixtures for API and service tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_translation_service
from src.api.main import app
from src.services.bedrock_client import BedrockCompletionClient
from src.services.translation_service import TranslationService


def make_converse_response(text, request_id="request-123"):
    """Build a Converse API response carrying one text block."""
    response = {
        "output": {
            "message": {
                "role": "assistant",
                "content": [{"text": text}],
            }
        },
        "stopReason": "end_turn",
        "usage": {"inputTokens": 42, "outputTokens": 7, "totalTokens": 49},
    }
    if request_id is not None:
        response["ResponseMetadata"] = {"RequestId": request_id, "HTTPStatusCode": 200}
    return response


@pytest.fixture
def converse_response():
    """Factory for Converse API responses."""
    return make_converse_response


@pytest.fixture
def bedrock_runtime():
    """A stand-in for the boto3 bedrock-runtime client."""
    return MagicMock()


@pytest.fixture
def completion_client(bedrock_runtime):
    return BedrockCompletionClient(
        region="us-east-1",
        model_id="anthropic.claude-3-sonnet-20240229-v1:0",
        client=bedrock_runtime,
    )


@pytest.fixture
def translation_service(completion_client):
    return TranslationService(client=completion_client)


@pytest.fixture
def service_mock():
    return MagicMock(spec=TranslationService)


@pytest.fixture
def client():
    """TestClient without lifespan; each test installs its own service."""
    yield TestClient(app)
    app.dependency_overrides.clear()
