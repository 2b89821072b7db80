from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted session, command-line overrides), scaffold execution
and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from tree2fs.core.pipeline.engine import run_scaffold
from tree2fs.core.pipeline.validator import validate_config
from tree2fs.domain.config import get_default_config, load_config, save_config
from tree2fs.domain.constants import DEFAULT_INPUT_FILE
from tree2fs.domain.scaffold_models import ScaffoldResult
from tree2fs.infra.fs import normalize_path
from tree2fs.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from tree2fs.interface.cli import args as cli_args

logger = get_logger(__name__)

_MERGE_KEYS = ["input_path", "output_dir", "encoding", "print_tree", "dump_tree"]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failed run, 2 missing input, 130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    log_file = get_default_log_path() if args.log_file == "" else args.log_file
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"], DEFAULT_INPUT_FILE)
    if not os.path.isfile(input_path):
        msg = f"Input listing does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}")
        return 2

    # 6. Execution phase
    try:
        result = run_scaffold(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.")
        return 130

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _MERGE_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScaffoldResult) -> None:
    """
    Print the run result to standard output.

    Args:
        result: The scaffold result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}")
        leftover = result.summary.get("leftover")
        if leftover:
            for line in leftover:
                print(f"  {line}")
        return

    if result.tree_lines:
        print(".")
        for line in result.tree_lines:
            print(line)
        print()

    if result.dry_run:
        print("SIMULATION COMPLETE: no changes were made.")
        for op in result.operations:
            print(f"  - {op}")
        return

    print(f"Structure created successfully in '{result.output_dir}' directory")
    print(
        f"{result.directories} directories, {result.files} files, "
        f"{result.symlinks} symlinks"
    )
