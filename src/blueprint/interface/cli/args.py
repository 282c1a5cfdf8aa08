from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema ('create' and 'list' subcommands) and
translates parsed namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from blueprint.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Blueprint CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="blueprint",
        description=i18n.t("app.description"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    # --- Options shared by every subcommand ---
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-t", "--templates-dir",
        dest="templates_dir",
        default=None,
        help=i18n.t("cli.args.templates_dir"),
    )

    sub = p.add_subparsers(dest="command", metavar="{create,list}")
    sub.required = True

    create = sub.add_parser("create", parents=[common], help=i18n.t("cli.args.create"))
    create.add_argument("template", help=i18n.t("cli.args.template"))
    create.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    create.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    sub.add_parser("list", parents=[common], help=i18n.t("cli.args.list"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None means unset).
    """
    overrides: Dict[str, Any] = {}

    overrides["templates_dir"] = args.templates_dir
    overrides["output_dir"] = getattr(args, "output_dir", None)
    overrides["log_file"] = args.log_file

    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
