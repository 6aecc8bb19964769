"""
Pydantic models for request/response payloads.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, timezone


# ========== Translation Models ==========

class TranslationRequest(BaseModel):
    """
    Request model for term translation.

    Fields are optional at the parsing level so that missing values reach
    validate_translation_request and get a field-level message.
    """
    origin_locale: Optional[str] = Field(
        default=None,
        description="Source locale",
        examples=["pt-BR"]
    )
    destination_locale: Optional[str] = Field(
        default=None,
        description="Destination locale",
        examples=["en-US"]
    )
    terms: Optional[List[str]] = Field(
        default=None,
        description="Terms to translate (1 to 100 entries)",
        examples=[["Olá Chafy", "Como você está?"]]
    )


class TranslationResponse(BaseModel):
    """Response model for term translation."""
    terms_translated: List[str] = Field(
        ...,
        description="Translated terms, one per input term on a best-effort basis",
        examples=[["Hi, Chafy", "How are you?"]]
    )


# ========== Error Models ==========

class ErrorDetail(BaseModel):
    """A single field-level validation failure."""
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error response model."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int = Field(..., examples=[400])
    error: str = Field(..., examples=["Bad Request"])
    message: str = Field(..., examples=["Invalid request data: {'terms': 'terms must not be empty'}"])
    path: str = Field(..., examples=["/api/v1/translate"])
