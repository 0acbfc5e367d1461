"""Where: src/pathops/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

import logging

from pathops.config.config import (
    PROVIDER_DEFAULT,
    config as app_config,
    parse_log_level,
)

# Provider selection ----------------------------------------------------------

# Name looked up in the provider registry by default_path_utility().
_provider = (getattr(app_config, "provider", PROVIDER_DEFAULT) or "").strip().lower()
PROVIDER_NAME: str = _provider or PROVIDER_DEFAULT


# Logging thresholds ----------------------------------------------------------

CONSOLE_LOG_LEVEL: int = parse_log_level(app_config.console_log_level, logging.INFO)
FILE_LOG_LEVEL: int = parse_log_level(app_config.file_log_level, logging.DEBUG)


__all__ = ["CONSOLE_LOG_LEVEL", "FILE_LOG_LEVEL", "PROVIDER_NAME"]
