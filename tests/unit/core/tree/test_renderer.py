from __future__ import annotations

from sitecrafter.core.tree.reconciler import reconcile_actions
from sitecrafter.core.tree.renderer import render_tree_lines
from sitecrafter.domain.action_models import create_file_action


def test_render_uses_creation_order_and_connectors():
    tree = reconcile_actions([], [
        create_file_action("src/main.tsx", ""),
        create_file_action("src/components/Header.tsx", ""),
        create_file_action("index.html", ""),
    ]).tree

    assert render_tree_lines(tree) == [
        "├── src/",
        "│   ├── main.tsx",
        "│   └── components/",
        "│       └── Header.tsx",
        "└── index.html",
    ]


def test_render_empty_tree():
    assert render_tree_lines([]) == []
