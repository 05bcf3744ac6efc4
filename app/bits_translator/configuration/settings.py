"""Translator configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from bits_translator.configuration.translator import TranslatorSettings


class Settings(BaseSettings):
    """Application configuration settings.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from bits_translator.services import get_settings

        settings = get_settings()
        if settings.is_production:
            ...
        fallback = settings.translator.TRANSLATOR_FALLBACK_LANG
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    translator: TranslatorSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "translator": TranslatorSettings,
        }

        for name, settings_class in settings_map.items():
            if name not in kwargs:
                kwargs[name] = settings_class()

        super().__init__(**kwargs)
