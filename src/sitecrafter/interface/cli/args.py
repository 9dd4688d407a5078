from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from sitecrafter.domain.constants import COMPLETION_POLICIES
from sitecrafter.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sitecrafter CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sitecrafter",
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
    )

    # --- Inputs ---
    p.add_argument(
        "actions",
        nargs="*",
        metavar="ACTIONS_JSON",
        help=i18n.t("cli.args.actions"),
    )

    # --- Outputs ---
    p.add_argument(
        "-o", "--out",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.out"),
    )
    p.add_argument(
        "--mount-json",
        dest="mount_json",
        default=None,
        help=i18n.t("cli.args.mount_json"),
    )
    p.add_argument(
        "--save-actions",
        dest="save_actions",
        default=None,
        help=i18n.t("cli.args.save_actions"),
    )
    tree_group = p.add_mutually_exclusive_group()
    tree_group.add_argument(
        "--print-tree",
        dest="print_tree",
        action="store_const",
        const=True,
        default=None,
        help=i18n.t("cli.args.print_tree"),
    )
    tree_group.add_argument(
        "--no-print-tree",
        dest="print_tree",
        action="store_const",
        const=False,
        help=i18n.t("cli.args.no_print_tree"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Reconciliation ---
    p.add_argument(
        "--policy",
        dest="completion_policy",
        choices=list(COMPLETION_POLICIES),
        default=None,
        help=i18n.t("cli.args.policy"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None so the merge step can skip them.
    """
    overrides: Dict[str, Any] = {
        "output_dir": args.output_dir,
        "print_tree": args.print_tree,
        "completion_policy": args.completion_policy,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
