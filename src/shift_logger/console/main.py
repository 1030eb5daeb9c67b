from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from ..client.api_client import ApiClient
from ..logging_config import setup_logging
from ..settings import get_settings_module
from .ui import ShiftLoggerUI

logger = logging.getLogger(__name__)


def main(settings_module: Optional[str] = None) -> int:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    # Log lines on stdout would interleave with the menu, so file only.
    setup_logging(
        log_level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
        console=False,
    )

    api = ApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT_SECONDS)
    logger.info("Console client started against %s", settings.API_BASE_URL)
    try:
        ShiftLoggerUI(api).run()
    finally:
        api.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
