"""
Translation Service
Translates batches of terms with a single Bedrock call.
"""
from typing import List

from src.core.prompt_builder import build_system_prompt, build_user_message
from src.core.response_parser import extract_translated_content, parse_translated_terms
from src.services.bedrock_client import BedrockCompletionClient
from src.utils.logger import setup_logger
from src.utils.exceptions import InvalidModelResponseException, TranslationException

logger = setup_logger(__name__)


class TranslationService:
    """
    Handles term translation through a Bedrock completion client.

    All terms of a request go to the model in one prompt, one per line, and
    come back the same way. The model is not guaranteed to return one line
    per term; a mismatch is logged and the parsed lines are returned as-is.
    """

    def __init__(self, client: BedrockCompletionClient):
        self.client = client

    def translate_terms(
        self,
        origin_locale: str,
        destination_locale: str,
        terms: List[str]
    ) -> List[str]:
        """
        Translate terms from one locale to another.

        Args:
            origin_locale: Locale of the input terms
            destination_locale: Locale to translate into
            terms: Terms to translate

        Returns:
            Translated terms

        Raises:
            InvalidModelResponseException: If the model response has no text
            TranslationException: If the Bedrock call fails
        """
        try:
            logger.info(f"🌐 Translating {len(terms)} terms from {origin_locale} to {destination_locale}")

            system_prompt = build_system_prompt(origin_locale, destination_locale)
            user_message = build_user_message(terms)

            response = self.client.converse(system_prompt, user_message)

            content = extract_translated_content(response)
            translated_terms = parse_translated_terms(content, len(terms))

            logger.info(f"✅ Translation completed for {len(translated_terms)} terms")
            return translated_terms

        except InvalidModelResponseException as e:
            logger.error(f"Translation failed: {e}")
            raise InvalidModelResponseException(f"Translation failed: {e}") from e
        except Exception as e:
            logger.error(f"Translation failed: {e}", exc_info=True)
            raise TranslationException(f"Translation failed: {e}") from e
