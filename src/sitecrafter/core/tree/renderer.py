from __future__ import annotations

"""
Tree Renderer.

Converts the project tree into a visual ASCII representation for the folder
view. Entries are emitted in creation order; nothing is sorted.
"""

from typing import Iterable, List

from sitecrafter.domain.tree_models import FolderNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        tree: Iterable[Node],
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively transform the tree into a list of strings.

    Uses standard ASCII connectors (├──, └──). Folder entries carry a
    trailing slash.

    Args:
        tree: Nodes of the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries = list(tree)
    total = len(entries)

    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, FolderNode):
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree(node.children, lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector}{node.name}")


def render_tree_lines(tree: Iterable[Node]) -> List[str]:
    """Convenience wrapper returning the rendered lines."""
    lines: List[str] = []
    render_tree(tree, lines)
    return lines
