"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
import time
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from metatube_translation.config import PluginConfiguration
from metatube_translation.core.api.client import TranslationResult
from metatube_translation.core.translation.engines import TranslationEngine, TranslationMode
from metatube_translation.core.translation.exceptions import ProviderError
from metatube_translation.core.translation.gate import TranslationGate
from metatube_translation.core.translation.translator import MetadataTranslator


class StubClient:
    """Stub translate client returning ``f"{q}-{to}"`` and recording calls.

    Args:
        fail_on: Texts for which every call raises ProviderError
        failures_before_success: Number of leading calls that fail
    """

    def __init__(self, fail_on=(), failures_before_success: int = 0):
        self.calls = []
        self.fail_on = set(fail_on)
        self.failures_before_success = failures_before_success

    async def translate(self, q, from_lang, to_lang, engine, parameters=None):
        self.calls.append({
            "q": q,
            "from": from_lang,
            "to": to_lang,
            "engine": engine,
            "parameters": parameters,
            "at": time.monotonic(),
        })
        if q in self.fail_on:
            raise ProviderError(f"cannot translate {q}", engine=engine, status_code=500)
        if self.failures_before_success > 0:
            self.failures_before_success -= 1
            raise ProviderError("temporary failure", engine=engine, status_code=503)
        return TranslationResult(translated_text=f"{q}-{to_lang}")

    @property
    def texts(self):
        return [call["q"] for call in self.calls]


class NoDelayGate(TranslationGate):
    """Gate that records requested delays but does not sleep."""

    def __init__(self):
        super().__init__()
        self.delays = []

    async def run_exclusively(self, min_delay, operation):
        if min_delay:
            self.delays.append(min_delay)
        return await super().run_exclusively(0, operation)

    async def pace(self, min_delay):
        self.delays.append(min_delay)


@pytest.fixture
def stub_client():
    """Stub translate client."""
    return StubClient()


@pytest.fixture
def no_delay_gate():
    """Fresh gate that skips the per-engine delay."""
    return NoDelayGate()


@pytest.fixture
def plugin_config():
    """Mutable configuration with both mode flags set."""
    return PluginConfiguration(
        server="http://metatube.test",
        translation_engine=TranslationEngine.GOOGLE_FREE,
        translation_mode=TranslationMode.BOTH,
    )


@pytest.fixture
def make_translator(no_delay_gate, plugin_config):
    """Build a MetadataTranslator around a client, reading ``plugin_config`` live."""
    def factory(client):
        return MetadataTranslator(
            client,
            config_provider=lambda: plugin_config,
            gate=no_delay_gate,
        )
    return factory


@pytest.fixture
def make_stub_client():
    """Factory for stub clients with scripted failures."""
    return StubClient
