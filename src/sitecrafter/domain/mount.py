from __future__ import annotations

"""
Mount Target Interface.

Abstract contract for the execution sandbox (or any other consumer) that
materializes a mount descriptor.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class MountTarget(ABC):
    """
    Abstract consumer of mount descriptors.
    """

    @abstractmethod
    def mount(self, descriptor: Dict[str, Any]) -> None:
        """
        Materialize the given descriptor.

        Args:
            descriptor: Nested {'directory': ...} / {'file': {'contents': ...}}
                        mapping keyed by entry name.
        """
        pass
