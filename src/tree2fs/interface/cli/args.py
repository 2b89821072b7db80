from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides. Every flag is optional: a bare invocation reads
'tree.txt' and writes into 'output'.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree2fs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree2fs",
        description=(
            "Recreate directories, empty files and symlinks from a "
            "'tree'-style directory listing."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Listing file to read (default: tree.txt).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help="Directory to create the structure in (default: output).",
    )
    p.add_argument(
        "--encoding",
        dest="encoding",
        default=None,
        help="Text encoding of the listing file (default: utf-8).",
    )

    # --- Runtime Behavior ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and plan without touching the filesystem.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the parsed tree re-rendered as a listing.",
    )
    p.add_argument(
        "--dump-tree",
        action="store_true",
        help="Include the parsed tree as JSON in --json output.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective configuration for later runs.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (user data dir when PATH is omitted).",
        metavar="PATH",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

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
        Dict[str, Any]: Configuration overrides subset. Unset options map to None.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_dir": args.output_dir,
        "encoding": args.encoding,
    }

    if args.print_tree:
        overrides["print_tree"] = True
    if args.dump_tree:
        overrides["dump_tree"] = True

    return overrides
