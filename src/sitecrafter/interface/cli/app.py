from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted state, CLI overrides), reconciliation of action files
into a build session, and output of the tree and mount descriptor.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from sitecrafter.core.services.session import BuildSession, summarize_session
from sitecrafter.core.services.validator import validate_config
from sitecrafter.core.tree.editor import count_nodes
from sitecrafter.core.tree.renderer import render_tree_lines
from sitecrafter.domain.config import get_default_config, load_config
from sitecrafter.domain.errors import SiteCrafterError
from sitecrafter.infra.action_files import read_actions_file, write_actions_file
from sitecrafter.infra.fs import DirectoryMountTarget, normalize_path, write_descriptor_json
from sitecrafter.infra.logging import LoggingConfig, configure_logging, get_logger
from sitecrafter.interface.cli import args as cli_args
from sitecrafter.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Exit code (0 success, 1 build failure, 2 missing input,
             130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=None))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    for path in args.actions:
        if not os.path.isfile(path):
            msg = i18n.t("cli.errors.path_not_exist", path=path)
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

    session = BuildSession(completion_policy=conf["completion_policy"])
    try:
        for path in args.actions:
            logger.info(f"Applying action file: {path}")
            session.enqueue(read_actions_file(path))

        descriptor = session.mount_descriptor()

        if conf["output_dir"]:
            out_dir = normalize_path(conf["output_dir"], fallback=os.getcwd())
            DirectoryMountTarget(out_dir).mount(descriptor)
            print(i18n.t("cli.status.mounted", path=out_dir), file=sys.stderr)

        if args.mount_json:
            write_descriptor_json(args.mount_json, descriptor)
            print(i18n.t("cli.status.mount_json", path=args.mount_json), file=sys.stderr)

        if args.save_actions:
            write_actions_file(args.save_actions, list(session.actions))
            print(i18n.t("cli.status.saved_actions", path=args.save_actions), file=sys.stderr)

    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except (SiteCrafterError, OSError) as e:
        msg = i18n.t("cli.errors.failed", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(descriptor, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(session, print_tree=conf["print_tree"])

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values."""
    out = dict(base)
    for k in ("output_dir", "print_tree", "completion_policy", "log_level"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(session: BuildSession, print_tree: bool) -> None:
    if print_tree:
        for line in render_tree_lines(session.tree):
            print(line)

    stats = summarize_session(session)
    folders, files = count_nodes(session.tree)
    print(i18n.t("cli.status.success"))
    print(i18n.t("cli.status.summary", folders=folders, files=files, **stats))


if __name__ == "__main__":
    sys.exit(main())
