from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the generation backend client.
"""

from sitecrafter.infra.network.common import USER_AGENT, join_url
from sitecrafter.infra.network.generation_client import GenerationClient

__all__ = [
    "GenerationClient",
    "USER_AGENT",
    "join_url",
]
