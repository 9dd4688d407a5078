from __future__ import annotations

"""
Project Tree Data Models.

Provides the node types that make up the in-memory project tree synthesized
from file-creation actions. Nodes own their children directly; the tree
itself is the ordered list of root nodes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Discriminator for the two node types."""
    FILE = "file"
    FOLDER = "folder"


@dataclass
class FileNode:
    """
    Represents a leaf entry (file) in the project tree.

    Attributes:
        name: Last path segment.
        path: Slash-joined path from the tree root. Unique identity key.
        content: File contents. None until a payload has been stored.
    """
    name: str
    path: str
    content: Optional[str] = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE


@dataclass
class FolderNode:
    """
    Represents a directory entry in the project tree.

    Attributes:
        name: Last path segment.
        path: Slash-joined path from the tree root. Unique identity key.
        children: Ordered child nodes, in creation order.
    """
    name: str
    path: str
    children: List["Node"] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FOLDER


Node = Union[FileNode, FolderNode]
Tree = List[Node]

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def join_path(prefix: str, segment: str) -> str:
    """Append one segment to an accumulated node path."""
    return f"{prefix}{PATH_SEPARATOR}{segment}"


def normalize_node_path(path: str) -> str:
    """
    Convert a relative action path into the stored node path form.

    Stored paths always start with the separator because they are built by
    accumulating segments onto an empty prefix.
    """
    if path.startswith(PATH_SEPARATOR):
        return path
    return PATH_SEPARATOR + path
