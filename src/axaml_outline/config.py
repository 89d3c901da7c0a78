"""Local configuration for axaml-outline."""

from __future__ import annotations

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


DEFAULT_SHOW_LINE_NUMBERS = False
DEFAULT_CACHE_ENABLED = True
DEFAULT_STRICT_TAGS = False
DEFAULT_LOG_LEVEL = "WARNING"

# Avalonia default XML namespace, used to sniff documents without an .axaml extension.
AVALONIA_NAMESPACE = 'xmlns="https://github.com/avaloniaui"'
AXAML_EXTENSION = ".axaml"
AXAML_LANGUAGE_ID = "axaml"

AXAML_OUTLINE_SHOW_LINE_NUMBERS = _env_flag("AXAML_OUTLINE_SHOW_LINE_NUMBERS", DEFAULT_SHOW_LINE_NUMBERS)
AXAML_OUTLINE_CACHE_ENABLED = _env_flag("AXAML_OUTLINE_CACHE_ENABLED", DEFAULT_CACHE_ENABLED)
AXAML_OUTLINE_STRICT_TAGS = _env_flag("AXAML_OUTLINE_STRICT_TAGS", DEFAULT_STRICT_TAGS)
AXAML_OUTLINE_LOG_LEVEL = os.getenv("AXAML_OUTLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
