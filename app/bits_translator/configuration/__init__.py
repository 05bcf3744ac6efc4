"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class
    TranslatorSettings: Translator defaults read from the environment

Example:
    ```python
    from bits_translator.services import get_settings

    settings = get_settings()
    log_level = settings.LOG_LEVEL
    ```
"""

from bits_translator.configuration.settings import Settings
from bits_translator.configuration.translator import TranslatorSettings

__all__ = ["Settings", "TranslatorSettings"]
