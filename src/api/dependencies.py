"""
FastAPI dependencies.
"""
from fastapi import Request

from src.services.translation_service import TranslationService


def get_translation_service(request: Request) -> TranslationService:
    """Return the translation service built at startup."""
    return request.app.state.translation_service
