# table_extract/settings.py
# Centralized configuration, read from environment variables.

from __future__ import annotations

import os
from functools import lru_cache

# Tree builders BeautifulSoup knows about. Only html.parser ships with Python;
# the others need lxml / html5lib installed.
KNOWN_PARSERS = ("html.parser", "lxml", "html5lib")


class Settings:
    """
    All configuration is read from environment variables when the class is defined.
    Use get_settings() rather than instantiating directly.
    """

    # --- Parsing ---
    HTML_PARSER: str = os.getenv("TABLE_EXTRACT_PARSER", "html.parser")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    # --- HTTP service ---
    # Upper bound on the size of the html field accepted by POST /api/tables.
    MAX_HTML_BYTES: int = int(os.getenv("MAX_HTML_BYTES", str(5 * 1024 * 1024)))

    def validate(self) -> None:
        """
        Raise a clear error if the configuration cannot work.
        Call this early in app startup if you want strict checks.
        """
        if self.HTML_PARSER not in KNOWN_PARSERS:
            raise RuntimeError(
                f"Unknown TABLE_EXTRACT_PARSER {self.HTML_PARSER!r}; expected one of: {', '.join(KNOWN_PARSERS)}"
            )
        if self.MAX_HTML_BYTES <= 0:
            raise RuntimeError("MAX_HTML_BYTES must be positive")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached accessor for settings.
    Usage:
        from table_extract.settings import get_settings
        st = get_settings()
        st.validate()  # optional strict check
    """
    return Settings()
