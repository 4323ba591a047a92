"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

from metatube_translation.core.translation.engines import TranslationEngine, TranslationMode
from metatube_translation.core.translation.exceptions import InvalidConfigurationError

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if _debug_mode:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")

# Load .env from the current working directory if it exists
_env_file = Path.cwd() / '.env'
_dotenv_result = load_dotenv(_env_file)
if _debug_mode:
    _config_logger.debug(f"load_dotenv({_env_file.absolute()}) returned: {_dotenv_result}")

# MetaTube server
METATUBE_SERVER_URL = os.getenv('METATUBE_SERVER_URL', '')
METATUBE_TOKEN = os.getenv('METATUBE_TOKEN', '')
REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '60'))

# Every field translation gets this many attempts before the error surfaces
MAX_TRANSLATION_ATTEMPTS = 5

# Language codes understood by the MetaTube translate endpoint
AUTO_LANGUAGE_CODE = "auto"
JAPANESE_LANGUAGE_CODE = "ja"

DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'


def _mask(secret: str) -> str:
    return '***' + secret[-4:] if secret else '(not set)'


@dataclass
class PluginConfiguration:
    """Plugin settings consumed by the translator.

    Instances are cheap and meant to be rebuilt for every translation call,
    so edits to the environment (or to whatever provider the host plugs in)
    take effect on the next field.
    """
    server: str = ''
    token: str = ''
    translation_engine: TranslationEngine = TranslationEngine.GOOGLE_FREE
    translation_mode: TranslationMode = TranslationMode.BOTH
    translate_actors: bool = False
    baidu_app_id: str = ''
    baidu_app_key: str = ''
    google_api_key: str = ''
    deepl_api_key: str = ''
    openai_api_key: str = ''
    request_timeout: int = REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "PluginConfiguration":
        """
        Build a configuration from the current environment.

        Raises:
            InvalidConfigurationError: If TRANSLATION_ENGINE or TRANSLATION_MODE
                names an unknown value
        """
        engine_name = os.getenv('TRANSLATION_ENGINE', TranslationEngine.GOOGLE_FREE.value)
        mode_value = os.getenv('TRANSLATION_MODE', 'title,summary')
        try:
            engine = TranslationEngine.from_name(engine_name)
            mode = TranslationMode.parse(mode_value)
        except ValueError as e:
            raise InvalidConfigurationError(
                str(e),
                context={'TRANSLATION_ENGINE': engine_name, 'TRANSLATION_MODE': mode_value}
            ) from e

        config = cls(
            server=os.getenv('METATUBE_SERVER_URL', METATUBE_SERVER_URL),
            token=os.getenv('METATUBE_TOKEN', METATUBE_TOKEN),
            translation_engine=engine,
            translation_mode=mode,
            translate_actors=os.getenv('TRANSLATE_ACTORS', 'false').lower() == 'true',
            baidu_app_id=os.getenv('BAIDU_APP_ID', ''),
            baidu_app_key=os.getenv('BAIDU_APP_KEY', ''),
            google_api_key=os.getenv('GOOGLE_API_KEY', ''),
            deepl_api_key=os.getenv('DEEPL_API_KEY', ''),
            openai_api_key=os.getenv('OPENAI_API_KEY', ''),
            request_timeout=int(os.getenv('REQUEST_TIMEOUT', str(REQUEST_TIMEOUT))),
        )
        if DEBUG_MODE or _debug_mode:
            config.log_values()
        return config

    def log_values(self):
        """Log the loaded values with credentials masked."""
        _config_logger.debug("=" * 60)
        _config_logger.debug("LOADED TRANSLATION CONFIGURATION:")
        _config_logger.debug(f"   METATUBE_SERVER_URL: {self.server or '(not set)'}")
        _config_logger.debug(f"   METATUBE_TOKEN: {_mask(self.token)}")
        _config_logger.debug(f"   TRANSLATION_ENGINE: {self.translation_engine.value}")
        _config_logger.debug(f"   TRANSLATION_MODE: {self.translation_mode}")
        _config_logger.debug(f"   TRANSLATE_ACTORS: {self.translate_actors}")
        _config_logger.debug(f"   BAIDU_APP_ID: {self.baidu_app_id or '(not set)'}")
        _config_logger.debug(f"   BAIDU_APP_KEY: {_mask(self.baidu_app_key)}")
        _config_logger.debug(f"   GOOGLE_API_KEY: {_mask(self.google_api_key)}")
        _config_logger.debug(f"   DEEPL_API_KEY: {_mask(self.deepl_api_key)}")
        _config_logger.debug(f"   OPENAI_API_KEY: {_mask(self.openai_api_key)}")
        _config_logger.debug("=" * 60)
