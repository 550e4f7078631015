"""Runtime configuration.

Values are read from the environment once, at import time. Every function
that uses one of them also accepts an explicit override.
"""

from __future__ import annotations

import os

# Production CDN serving the per-dataset CSV slices
DEFAULT_API_BASE_URL = "https://cdn-voicings.pianodb.org"

API_BASE_URL: str = os.environ.get("PIANODB_API_URL", DEFAULT_API_BASE_URL).rstrip("/")

# Seconds before an HTTP request is abandoned
REQUEST_TIMEOUT: float = float(os.environ.get("PIANODB_TIMEOUT", "30"))

# Tab-separated PCID thesaurus used by default_thesaurus()
THESAURUS_PATH: str | None = os.environ.get("PIANODB_THESAURUS_PATH") or None
