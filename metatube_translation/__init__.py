"""
MetaTube metadata translation

Translates movie and actor metadata fields through the MetaTube server's
translation engines, one request at a time.
"""
from .config import PluginConfiguration
from .core.api.client import MetaTubeApiClient, TranslationResult
from .core.metadata import ActorInfo, MovieInfo
from .core.translation.engines import TranslationEngine, TranslationMode
from .core.translation.exceptions import (
    TranslationError,
    InvalidConfigurationError,
    InvalidLanguageError,
    ProviderError,
)
from .core.translation.gate import TranslationGate, get_translation_gate
from .core.translation.retry_manager import RetryExecutor
from .core.translation.translator import MetadataTranslator

__all__ = [
    'PluginConfiguration',
    'MetaTubeApiClient',
    'TranslationResult',
    'ActorInfo',
    'MovieInfo',
    'TranslationEngine',
    'TranslationMode',
    'TranslationError',
    'InvalidConfigurationError',
    'InvalidLanguageError',
    'ProviderError',
    'TranslationGate',
    'get_translation_gate',
    'RetryExecutor',
    'MetadataTranslator',
]
