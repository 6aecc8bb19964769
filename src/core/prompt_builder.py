"""
Prompt construction for batched term translation.
"""
from typing import Iterable

from langchain_core.prompts import PromptTemplate

SYSTEM_PROMPT = PromptTemplate.from_template(
    "You are a professional translator specialized in accurate, context-aware translation. "
    "Your task is to translate terms from the '{origin_locale}' language to the '{destination_locale}' language. "
    "Important rules: "
    "1. Keep the original context and tone "
    "2. Keep proper nouns unchanged unless they have an established translation "
    "3. Return ONLY the translations, one per line, in the same order as the original terms "
    "4. Do not add explanations, numbering or extra formatting "
    "5. If a term cannot be translated, keep the original term"
)

USER_MESSAGE_HEADER = "Translate the following terms:\n\n"


def build_system_prompt(origin_locale: str, destination_locale: str) -> str:
    """
    Build the system instruction for a locale pair.

    Args:
        origin_locale: Locale of the input terms (e.g. 'pt-BR')
        destination_locale: Locale to translate into (e.g. 'en-US')

    Returns:
        System instruction text
    """
    return SYSTEM_PROMPT.format(
        origin_locale=origin_locale,
        destination_locale=destination_locale,
    )


def build_user_message(terms: Iterable[str]) -> str:
    """List the terms one per line after a fixed header."""
    return USER_MESSAGE_HEADER + "".join(f"{term}\n" for term in terms)
