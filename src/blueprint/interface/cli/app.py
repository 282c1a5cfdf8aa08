from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging and
validation, logging bootstrap, command dispatch and result rendering.
Turns fatal conditions into stderr messages and non-zero exit codes.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from blueprint.core.engine import run_create
from blueprint.core.templates import list_templates
from blueprint.domain.config import get_default_config, validate_config
from blueprint.domain.constants import BUNDLED_TEMPLATES_DIR
from blueprint.domain.outline_models import CreateResult, FolderReport
from blueprint.infra.fs import normalize_path
from blueprint.infra.logging import LoggingConfig, configure_logging, get_logger
from blueprint.interface.cli import args as cli_args
from blueprint.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing (usage errors exit with status 2 here)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration resolution
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"]))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"CLI command '{args.command}' with configuration: {conf}")

    # 4. Dispatch
    try:
        if args.command == "list":
            return _run_list(conf)
        return _run_create(args.template, conf, json_output=bool(args.json_output))
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_create(template_name: str, conf: Dict[str, Any], *, json_output: bool) -> int:
    """Run 'create', streaming the per-folder log unless JSON output is requested."""
    if json_output:
        result = run_create(
            template_name,
            templates_dir=conf["templates_dir"],
            target_dir=conf["output_dir"],
        )
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        return EXIT_OK if result.ok else EXIT_FAILURE

    result = run_create(
        template_name,
        templates_dir=conf["templates_dir"],
        target_dir=conf["output_dir"],
        on_report=_print_report,
        on_start=lambda _path, target: _print_header(template_name, target),
    )

    if not result.ok:
        _print_error(result)
        return EXIT_FAILURE

    print()
    print(i18n.t("cli.status.done"))
    return EXIT_OK


def _run_list(conf: Dict[str, Any]) -> int:
    """Print the available template names, one per line."""
    templates_dir = normalize_path(conf["templates_dir"], BUNDLED_TEMPLATES_DIR)
    names = list_templates(templates_dir)
    if not names:
        print(i18n.t("cli.status.no_templates", path=templates_dir), file=sys.stderr)
    for name in names:
        print(name)
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys are merged and None values are ignored.
    """
    out = dict(base)
    for k in ("templates_dir", "output_dir", "log_level", "log_file"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_header(template_name: str, target_dir: str) -> None:
    print(i18n.t("cli.status.header", name=template_name, path=target_dir))
    print()


def _print_report(report: FolderReport) -> None:
    key = "cli.status.created" if report.created else "cli.status.exists"
    print(i18n.t(key, path=report.path), flush=True)


def _print_error(result: CreateResult) -> None:
    """Render a failed run on stderr."""
    if result.summary.get("error_kind") == "template_not_found":
        print(i18n.t("cli.errors.template_not_found", name=result.template_name), file=sys.stderr)
        print(i18n.t("cli.errors.looking_for", path=result.template_path), file=sys.stderr)
        return

    print(i18n.t("cli.errors.creation_failed", error=result.error), file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
