"""
Per-engine request parameters.

Each engine needs its own credential query parameters, and some engines
enforce tighter request rates than others. Both are derived here from the
configuration in effect at call time.
"""

from dataclasses import dataclass, field
from typing import Dict

from .engines import TranslationEngine
from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class ProviderRequest:
    """Credential parameters and minimum spacing for one translation call."""
    parameters: Dict[str, str] = field(default_factory=dict)
    min_delay: float = 0.0  # Seconds to wait before the call is sent


def build_provider_parameters(engine: TranslationEngine, configuration) -> ProviderRequest:
    """
    Build the request parameters for the selected engine.

    Args:
        engine: Selected translation engine
        configuration: PluginConfiguration holding the credentials

    Returns:
        ProviderRequest with the engine's query parameters and minimum delay

    Raises:
        InvalidConfigurationError: If the engine is not a known TranslationEngine
    """
    if engine is TranslationEngine.BAIDU:
        # Baidu allows 1 request per second
        return ProviderRequest({
            "baidu-app-id": configuration.baidu_app_id,
            "baidu-app-key": configuration.baidu_app_key,
        }, min_delay=1.0)

    if engine is TranslationEngine.GOOGLE:
        # Google allows 10 requests per second
        return ProviderRequest({
            "google-api-key": configuration.google_api_key,
        }, min_delay=0.1)

    if engine is TranslationEngine.GOOGLE_FREE:
        return ProviderRequest({}, min_delay=0.1)

    if engine is TranslationEngine.DEEPL:
        return ProviderRequest({
            "deepl-api-key": configuration.deepl_api_key,
        }, min_delay=0.1)

    if engine is TranslationEngine.OPENAI:
        return ProviderRequest({
            "openai-api-key": configuration.openai_api_key,
        }, min_delay=1.0)

    raise InvalidConfigurationError(
        f"Invalid translation engine: {engine}",
        context={'engine': engine}
    )
