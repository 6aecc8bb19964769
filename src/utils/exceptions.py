"""
Custom exceptions for the application.
"""
from typing import List, Optional


class TranslationAPIException(Exception):
    """Base exception for the Term Translation API."""
    pass


class TranslationException(TranslationAPIException):
    """Exception raised when a translation request cannot be completed."""
    pass


class InvalidModelResponseException(TranslationException):
    """Exception raised when the model response carries no usable text."""
    pass


class LLMException(TranslationAPIException):
    """Exception raised while setting up the Bedrock client."""
    pass


class ValidationException(TranslationAPIException):
    """Exception raised during input validation."""

    def __init__(self, errors: List, message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or "Invalid request data")
