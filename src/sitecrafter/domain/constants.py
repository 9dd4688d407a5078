from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide constants: versioning, backend defaults and
the reconciliation completion policies.
"""

from typing import Tuple

APP_NAME = "SiteCrafter"
APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_BACKEND_URL = "http://localhost:3000"
DEFAULT_REQUEST_TIMEOUT = 30

# 'applied' completes only the actions folded into the tree in a pass,
# 'all' completes the whole action list (legacy sweep).
COMPLETION_POLICIES: Tuple[str, ...] = ("applied", "all")
DEFAULT_COMPLETION_POLICY = "applied"

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
