from ordergallery.configs.logging_init import initialize_loggers, logger
from ordergallery.configs.settings_models import Settings

# Settings
# Overwrite priority: environment variables > default values
settings = Settings()

initialize_loggers(verbose_level=settings.logging.verbosity_level)

API_BASE_URL = settings.api.url
logger.debug(f"Order backend URL: {API_BASE_URL}")
