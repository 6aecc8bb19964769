"""
Translation Endpoint
"""
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from config.settings import settings
from src.api.dependencies import get_translation_service
from src.core.validation import validate_translation_request
from src.models.schemas import ErrorResponse, TranslationRequest, TranslationResponse
from src.services.translation_service import TranslationService
from src.utils.exceptions import ValidationException
from src.utils.logger import setup_logger

logger = setup_logger(__name__)
router = APIRouter()


@router.post(
    "/translate",
    response_model=TranslationResponse,
    summary="Translate terms",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def translate_terms(
    request: TranslationRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Translate a list of terms from one locale to another using AWS Bedrock.

    Args:
        request: TranslationRequest with locales and up to 100 terms

    Returns:
        TranslationResponse with the translated terms
    """
    errors = validate_translation_request(request, settings.MAX_TERMS_PER_REQUEST)
    if errors:
        raise ValidationException(errors)

    logger.info(
        f"🌐 Translation request: {request.origin_locale} -> {request.destination_locale}, "
        f"{len(request.terms)} terms"
    )

    # The Bedrock call blocks, keep it off the event loop
    translated_terms = await run_in_threadpool(
        translation_service.translate_terms,
        request.origin_locale,
        request.destination_locale,
        request.terms,
    )

    return TranslationResponse(terms_translated=translated_terms)
