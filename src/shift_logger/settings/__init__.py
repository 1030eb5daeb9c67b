import os


def get_settings_module() -> str:
    """Map APP_ENV to a settings module; defaults to development."""
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "shift_logger.settings.production"

    if env in {"test", "testing"}:
        return "shift_logger.settings.testing"

    return "shift_logger.settings.development"
