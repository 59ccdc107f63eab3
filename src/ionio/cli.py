"""
ionio-artifact - inspect and specialize compiled contract artifacts.

Usage:
    ionio-artifact inspect artifact.json
    ionio-artifact transform artifact.json --args '[5, {"newName": "owner"}]' --out out.json
    ionio-artifact transform artifact.json --args-file args.json --out out.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ionio.artifact import Artifact, export_artifact, import_artifact
from ionio.binder import bindings_from_json, transform_artifact
from ionio.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVELS, placeholder
from ionio.errors import ArtifactError, FormatError
from ionio.rewrite import count_token

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _load_bindings(args: argparse.Namespace) -> list:
    if args.args_file is not None:
        try:
            text = args.args_file.read_text(encoding="utf-8")
        except OSError as e:
            raise FormatError(f"failed to read bindings: {e}", str(args.args_file)) from e
        source = str(args.args_file)
    else:
        text = args.args
        source = "--args"

    try:
        items = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"bindings JSON parse error: {e.msg}", source) from e
    if not isinstance(items, list):
        raise FormatError(f"bindings: expected array, got {type(items).__name__}", source)
    return bindings_from_json(items)


def render_summary(artifact: Artifact) -> None:
    console.print(f"[bold]{escape(artifact.contract_name)}[/bold]")

    inputs = Table(title="Constructor inputs")
    inputs.add_column("#", justify="right")
    inputs.add_column("Name")
    inputs.add_column("Type")
    inputs.add_column("asm refs", justify="right")
    for i, p in enumerate(artifact.constructor_inputs):
        refs = count_token(artifact.functions, placeholder(p.name))
        inputs.add_row(str(i), escape(p.name), escape(p.type), str(refs))
    console.print(inputs)

    functions = Table(title="Functions")
    functions.add_column("Name")
    functions.add_column("Inputs")
    functions.add_column("Requirements", justify="right")
    functions.add_column("asm tokens", justify="right")
    for f in artifact.functions:
        params = ", ".join(f"{p.name}: {p.type}" for p in f.function_inputs)
        functions.add_row(escape(f.name), escape(params), str(len(f.require)), str(len(f.asm)))
    console.print(functions)

    declared = {placeholder(n) for n in artifact.constructor_input_names()}
    unbound = [t for t in artifact.placeholders() if t not in declared]
    if unbound:
        console.print(f"[yellow]placeholders with no constructor input:[/yellow] {escape(', '.join(unbound))}")


def cmd_inspect(args: argparse.Namespace) -> int:
    artifact = import_artifact(args.artifact)
    render_summary(artifact)
    return 0


def cmd_transform(args: argparse.Namespace) -> int:
    artifact = import_artifact(args.artifact)
    bindings = _load_bindings(args)
    result = transform_artifact(artifact, bindings)
    export_artifact(result, args.out)

    bound = len(artifact.constructor_inputs) - len(result.constructor_inputs)
    logger.info(f"Transformed {artifact.contract_name}: {bound} input(s) bound")
    console.print(f"wrote: {args.out} (bound={bound}, remaining={len(result.constructor_inputs)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ionio-artifact", description="Inspect and specialize compiled contract artifacts"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s, from IONIO_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_inspect = subparsers.add_parser("inspect", help="Summarize constructor inputs and functions")
    p_inspect.add_argument("artifact", type=Path)
    p_inspect.set_defaults(func=cmd_inspect)

    p_transform = subparsers.add_parser("transform", help="Bind or rename constructor inputs")
    p_transform.add_argument("artifact", type=Path)
    source = p_transform.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--args", type=str, help='JSON array, one entry per constructor input: a value, {"newName": ...} or null'
    )
    source.add_argument("--args-file", type=Path, help="File containing the JSON bindings array")
    p_transform.add_argument("--out", type=Path, required=True, help="Where to write the transformed artifact")
    p_transform.set_defaults(func=cmd_transform)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid IONIO_LOG_LEVEL {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        err_console.print(f"[red]error:[/red] file not found: {escape(str(e.filename))}")
    except ArtifactError as e:
        err_console.print(f"[red]error:[/red] {escape(e.message)}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
