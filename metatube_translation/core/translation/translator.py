"""
Field-level translation of movie and actor metadata.

Each field goes through the same chain:

    build_provider_parameters -> TranslationGate -> RetryExecutor -> client

Fields are translated one after another and written back as soon as they
come back. The first error that survives the retries aborts the call;
fields translated before it keep their new values.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from metatube_translation.config import (
    AUTO_LANGUAGE_CODE,
    JAPANESE_LANGUAGE_CODE,
    PluginConfiguration,
)
from metatube_translation.core.metadata import ActorInfo, MovieInfo
from .engines import TranslationMode
from .exceptions import InvalidLanguageError
from .gate import TranslationGate, get_translation_gate
from .provider_params import build_provider_parameters
from .retry_manager import RetryExecutor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """A translatable field.

    Attributes:
        name: Attribute name on the record
        mode: Flag that must be set for the field to be translated, or None
            to translate whenever the field is non-blank
        is_list: The attribute holds a list of strings, translated entry by entry
        option: Boolean PluginConfiguration attribute that must be true, if any
    """
    name: str
    mode: Optional[TranslationMode] = None
    is_list: bool = False
    option: Optional[str] = None

    def enabled(self, configuration: PluginConfiguration) -> bool:
        if self.mode is not None and not (configuration.translation_mode & self.mode):
            return False
        if self.option is not None and not getattr(configuration, self.option):
            return False
        return True


MOVIE_FIELDS: List[FieldSpec] = [
    FieldSpec("title", mode=TranslationMode.TITLE),
    FieldSpec("summary", mode=TranslationMode.SUMMARY),
    # custom translations
    FieldSpec("director"),
    FieldSpec("genres", is_list=True),
    FieldSpec("maker"),
    FieldSpec("label"),
    FieldSpec("series"),
    # Off unless TRANSLATE_ACTORS is set; actor names are usually
    # translated separately through translate_actor_info.
    FieldSpec("actors", is_list=True, option="translate_actors"),
]

ACTOR_FIELDS: List[FieldSpec] = [
    FieldSpec("name"),
]


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _check_language(to: str):
    if not isinstance(to, str) or not to.strip():
        raise InvalidLanguageError(f"destination language is required, got {to!r}", language=to)
    if to.lower() == JAPANESE_LANGUAGE_CODE:
        raise InvalidLanguageError(f"language not allowed: {to}", language=to)


class MetadataTranslator:
    """Translates MovieInfo and ActorInfo records in place.

    Configuration is fetched from ``config_provider`` for every field, so a
    change of engine or credentials takes effect on the next request. As a
    consequence a single record may end up translated by two engines if the
    configuration changes mid-record.
    """

    def __init__(
        self,
        client,
        config_provider: Callable[[], PluginConfiguration] = PluginConfiguration.from_env,
        gate: Optional[TranslationGate] = None,
        retry_executor: Optional[RetryExecutor] = None
    ):
        """
        Args:
            client: Object with ``async translate(q, from_lang, to_lang, engine,
                parameters)`` returning something with ``translated_text``
                (normally MetaTubeApiClient)
            config_provider: Returns the configuration currently in effect
            gate: Gate to serialize requests through (defaults to the
                process-wide gate)
            retry_executor: Retry policy (defaults to RetryExecutor())
        """
        self.client = client
        self.config_provider = config_provider
        self.gate = gate or get_translation_gate()
        self.retry_executor = retry_executor or RetryExecutor()

    async def translate_text(self, q: str, from_lang: str, to_lang: str) -> str:
        """Translate a single string through the gate with retry."""
        configuration = self.config_provider()
        engine = configuration.translation_engine
        request = build_provider_parameters(engine, configuration)

        async def call() -> str:
            # Every attempt is spaced, retries included
            await self.gate.pace(request.min_delay)
            result = await self.client.translate(
                q, from_lang, to_lang, engine.value, dict(request.parameters)
            )
            return result.translated_text

        async def call_with_retry() -> str:
            return await self.retry_executor.execute(call, operation_id=f"translate[{engine.value}]")

        return await self.gate.run_exclusively(0, call_with_retry)

    async def _translate_fields(self, record, fields: List[FieldSpec], to: str):
        for spec in fields:
            if not spec.enabled(self.config_provider()):
                continue

            if spec.is_list:
                values = getattr(record, spec.name)
                if not values:
                    continue
                for i, value in enumerate(values):
                    if _is_blank(value):
                        continue
                    values[i] = await self.translate_text(value, AUTO_LANGUAGE_CODE, to)
                logger.debug(f"Translated {len(values)} {spec.name} entries to {to}")
                continue

            value = getattr(record, spec.name)
            if _is_blank(value):
                continue
            setattr(record, spec.name, await self.translate_text(value, AUTO_LANGUAGE_CODE, to))
            logger.debug(f"Translated {spec.name} to {to}")

    async def translate_movie_info(self, movie: MovieInfo, to: str):
        """
        Translate the text fields of ``movie`` into ``to``, in place.

        Title and summary follow the configured TranslationMode; director,
        genres, maker, label and series are translated whenever non-blank.

        Raises:
            InvalidLanguageError: If ``to`` is missing, blank or Japanese
            InvalidConfigurationError: If the configured engine is unknown
            ProviderError: If a field still fails after all attempts
        """
        _check_language(to)
        await self._translate_fields(movie, MOVIE_FIELDS, to)

    async def translate_actor_info(self, actor: ActorInfo, to: str):
        """Translate ``actor.name`` into ``to``, in place."""
        _check_language(to)
        await self._translate_fields(actor, ACTOR_FIELDS, to)
