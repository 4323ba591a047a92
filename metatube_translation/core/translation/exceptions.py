"""
Exception hierarchy for the metadata translation layer.

Every error raised by the translator derives from TranslationError, which
carries a human-readable message, a context dict and a ``recoverable`` flag.
Cancellation is never wrapped: ``asyncio.CancelledError`` passes through
every layer untouched.
"""

from typing import Optional, Dict, Any


class TranslationError(Exception):
    """Base exception for all translation-related errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
        recoverable: Whether retrying the same call may succeed
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


class InvalidConfigurationError(TranslationError):
    """Raised when the plugin configuration cannot be used (unknown engine, no server)."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context, recoverable=False)


class InvalidLanguageError(TranslationError, ValueError):
    """Raised when the requested destination language is not allowed.

    Attributes:
        language: The rejected language code
    """

    def __init__(self, message: str, language: Optional[str] = None):
        ctx = {'language': language} if language is not None else None
        super().__init__(message, ctx, recoverable=False)
        self.language = language


class ProviderError(TranslationError):
    """Raised when the translation server or the upstream engine fails.

    Transport errors, HTTP error statuses and malformed responses all end up
    here; the retry layer does not look any deeper than this.
    """

    def __init__(
        self,
        message: str,
        engine: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = dict(context or {})
        if engine is not None:
            ctx['engine'] = engine
        if status_code is not None:
            ctx['status_code'] = status_code
        super().__init__(message, ctx, recoverable=True)
        self.engine = engine
        self.status_code = status_code
