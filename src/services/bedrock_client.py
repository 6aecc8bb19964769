"""
Completion client for the AWS Bedrock Converse API.
"""
from typing import Any, Dict, Optional

import boto3

from src.utils.logger import setup_logger, bind_log_context
from src.utils.exceptions import LLMException

logger = setup_logger(__name__)


class BedrockCompletionClient:
    """
    Sends one system instruction and one user message to a Bedrock model.

    The underlying boto3 client is created once and shared across requests.
    Credentials are resolved by boto3 from the environment.
    """

    def __init__(
        self,
        region: str,
        model_id: str,
        max_tokens: int = 4000,
        temperature: float = 0.1,
        top_p: float = 0.9,
        client: Optional[Any] = None,
    ):
        self.region = region
        self.model_id = model_id
        self.inference_config = {
            "maxTokens": max_tokens,
            "temperature": temperature,
            "topP": top_p,
        }

        if client is not None:
            self.client = client
            return

        try:
            self.client = boto3.client("bedrock-runtime", region_name=region)
            logger.info(f"✅ Bedrock client initialized (region: {region}, model: {model_id})")
        except Exception as e:
            logger.error(f"Failed to initialize Bedrock client: {e}")
            raise LLMException(f"Bedrock client initialization failed: {e}")

    @classmethod
    def from_settings(cls, settings) -> "BedrockCompletionClient":
        return cls(
            region=settings.AWS_REGION,
            model_id=settings.BEDROCK_MODEL_ID,
            max_tokens=settings.BEDROCK_MAX_TOKENS,
            temperature=settings.BEDROCK_TEMPERATURE,
            top_p=settings.BEDROCK_TOP_P,
        )

    def converse(self, system_prompt: str, user_message: str) -> Dict[str, Any]:
        """
        Run one Converse call.

        Args:
            system_prompt: System instruction
            user_message: Text of the single user message

        Returns:
            Raw Converse response

        Raises:
            botocore errors propagate unchanged
        """
        bind_log_context(aws_bedrock_model=self.model_id, aws_region=self.region)

        response = self.client.converse(
            modelId=self.model_id,
            messages=[
                {
                    "role": "user",
                    "content": [{"text": user_message}],
                }
            ],
            system=[{"text": system_prompt}],
            inferenceConfig=self.inference_config,
        )

        request_id = ((response or {}).get("ResponseMetadata") or {}).get("RequestId")
        bind_log_context(aws_bedrock_request_id=request_id)

        usage = (response or {}).get("usage")
        if usage:
            logger.info(
                f"🤖 Bedrock call completed "
                f"(input tokens: {usage.get('inputTokens')}, output tokens: {usage.get('outputTokens')})"
            )

        return response
