from __future__ import annotations

"""
Domain Error Taxonomy.

All failures raised by the sitecrafter package derive from SiteCrafterError
so that interface layers can translate them into user-facing messages.
"""

from typing import Any, Optional


class SiteCrafterError(Exception):
    """Base class for every error raised by the package."""


class NodeKindConflictError(SiteCrafterError):
    """
    A path already holds a node of a different kind than the one requested.

    Attributes:
        path: Node path where the conflict was detected.
        existing: Kind of the node already stored at that path.
        requested: Kind the operation needed.
        action: Offending action, set when raised by a reconciliation pass.
        result: Partial reconciliation outcome up to and including the
                offending action, set together with 'action'.
    """

    def __init__(self, path: str, existing: str, requested: str):
        self.path = path
        self.existing = existing
        self.requested = requested
        self.action: Optional[Any] = None
        self.result: Optional[Any] = None
        super().__init__(
            f"Path '{path}' is a {existing}; cannot treat it as a {requested}."
        )


class ActionFormatError(SiteCrafterError, ValueError):
    """An action record could not be decoded."""


class GenerationError(SiteCrafterError):
    """The generation backend failed or answered with an unusable payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MountError(SiteCrafterError):
    """A mount target rejected or failed to materialize a descriptor."""
