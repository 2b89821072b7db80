from __future__ import annotations

"""
Scaffold orchestration pipeline.

Coordinates a complete run:
1. Validates configuration.
2. Loads the listing and strips its boilerplate.
3. Parses the listing into a TreeNode hierarchy.
4. Creates the output root and materializes the tree (or plans it on dry runs).
5. Reports the outcome as a ScaffoldResult.

Every failure is terminal for the run and comes back as an error result.
"""

import logging
from typing import Any, Dict, Optional

from tree2fs.core.analysis.tree_renderer import count_entries, render_listing
from tree2fs.core.loading.loader import read_listing
from tree2fs.core.materialize.materializer import iter_operations, materialize
from tree2fs.core.parsing.tree_parser import parse_listing
from tree2fs.core.pipeline.validator import validate_config
from tree2fs.domain.constants import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_DIR
from tree2fs.domain.errors import ListingFormatError, MaterializationError, TrailingInputError
from tree2fs.domain.scaffold_models import (
    ScaffoldResult,
    create_error_result,
    create_success_result,
)
from tree2fs.infra.fs import normalize_path, safe_mkdir

logger = logging.getLogger(__name__)


def run_scaffold(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> ScaffoldResult:
    """
    Execute the listing-to-filesystem pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, plan the operations without writing to disk.

    Returns:
        ScaffoldResult: Object containing status, counts and summary.
    """
    logger.info("Scaffold execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cfg["input_path"] = normalize_path(cfg["input_path"], DEFAULT_INPUT_FILE)
    cfg["output_dir"] = normalize_path(cfg["output_dir"], DEFAULT_OUTPUT_DIR)
    input_path = cfg["input_path"]
    output_dir = cfg["output_dir"]

    # -------------------------------------------------------------------------
    # 2) Load
    # -------------------------------------------------------------------------
    try:
        lines = read_listing(input_path, encoding=cfg["encoding"])
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Error reading listing '{input_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, dry_run=dry_run)

    # -------------------------------------------------------------------------
    # 3) Parse
    # -------------------------------------------------------------------------
    try:
        root = parse_listing(lines)
    except TrailingInputError as e:
        logger.error(f"Lines left after parsing: {e.leftover}")
        return create_error_result(
            str(e), cfg, dry_run=dry_run, summary_extra={"leftover": e.leftover}
        )
    except ListingFormatError as e:
        logger.error(f"Malformed listing: {e}")
        return create_error_result(
            str(e), cfg, dry_run=dry_run, summary_extra={"line": e.line}
        )

    counts = count_entries(root)
    logger.info(
        f"Parsed {counts['directories']} directories, {counts['files']} files "
        f"and {counts['symlinks']} symlinks."
    )

    tree_lines = render_listing(root) if cfg["print_tree"] else []
    tree_dict = root.to_dict() if cfg["dump_tree"] else {}

    # -------------------------------------------------------------------------
    # 4) Dry run short-circuit
    # -------------------------------------------------------------------------
    if dry_run:
        planned = [op.describe() for op in iter_operations(root, output_dir)]
        logger.info(f"Dry run: {len(planned)} operation(s) planned under '{output_dir}'.")
        return create_success_result(
            cfg,
            counts,
            dry_run=True,
            operations=planned,
            tree_lines=tree_lines,
            tree=tree_dict,
            summary_extra={"planned": len(planned)},
        )

    # -------------------------------------------------------------------------
    # 5) Materialize
    # -------------------------------------------------------------------------
    ok, err = safe_mkdir(output_dir)
    if not ok:
        msg = f"Error creating output directory '{output_dir}': {err}"
        logger.error(msg)
        return create_error_result(msg, cfg)

    try:
        applied = materialize(root, output_dir)
    except MaterializationError as e:
        return create_error_result(
            str(e), cfg, summary_extra={"failed_path": e.path, "applied": e.applied}
        )

    logger.info(f"Structure created in '{output_dir}'.")

    return create_success_result(
        cfg,
        counts,
        operations=[op.describe() for op in applied],
        tree_lines=tree_lines,
        tree=tree_dict,
        summary_extra={"applied": len(applied)},
    )
