"""
Parsing of Bedrock Converse responses into translated term lists.
"""
from typing import Any, Dict, List, Optional

from src.utils.exceptions import InvalidModelResponseException
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

INVALID_MODEL_RESPONSE = "Invalid model response"


def extract_translated_content(response: Optional[Dict[str, Any]]) -> str:
    """
    Pull the text of the first content block of the response message.

    Args:
        response: Raw Converse API response

    Returns:
        The block text, stripped

    Raises:
        InvalidModelResponseException: If the output, message, content list
            or the first block's text is missing
    """
    output = (response or {}).get("output") or {}
    message = output.get("message") or {}
    content_blocks = message.get("content") or []

    if not content_blocks:
        raise InvalidModelResponseException(INVALID_MODEL_RESPONSE)

    text = (content_blocks[0] or {}).get("text")
    if text is None:
        raise InvalidModelResponseException(INVALID_MODEL_RESPONSE)

    return text.strip()


def parse_translated_terms(content: str, expected_count: int) -> List[str]:
    """
    Split model output into translated terms.

    Blank lines are dropped and every line is stripped. A count that differs
    from expected_count is logged, not corrected.

    Args:
        content: Text returned by the model
        expected_count: Number of terms that were sent

    Returns:
        Translated terms in the order the model returned them
    """
    translated_terms = [line.strip() for line in content.split("\n") if line.strip()]

    if len(translated_terms) != expected_count:
        logger.warning(
            f"⚠️ Number of translations ({len(translated_terms)}) "
            f"does not match the expected count ({expected_count})"
        )

    return translated_terms
