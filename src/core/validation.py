"""
Request validation for the translate endpoint.
"""
from typing import List

from src.models.schemas import ErrorDetail, TranslationRequest


def _is_blank(value) -> bool:
    return value is None or not value.strip()


def validate_translation_request(request: TranslationRequest, max_terms: int) -> List[ErrorDetail]:
    """
    Check a translation request before any outbound call is made.

    Args:
        request: Parsed request body
        max_terms: Maximum number of terms accepted in one request

    Returns:
        One ErrorDetail per invalid field; empty when the request is valid
    """
    errors = []

    if _is_blank(request.origin_locale):
        errors.append(ErrorDetail(field="origin_locale", message="origin_locale is required"))

    if _is_blank(request.destination_locale):
        errors.append(ErrorDetail(field="destination_locale", message="destination_locale is required"))

    if request.terms is None:
        errors.append(ErrorDetail(field="terms", message="terms must not be null"))
    elif not request.terms:
        errors.append(ErrorDetail(field="terms", message="terms must not be empty"))
    elif len(request.terms) > max_terms:
        errors.append(ErrorDetail(field="terms", message=f"maximum of {max_terms} terms per request"))

    return errors
