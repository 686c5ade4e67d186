"""Command-line interface for pathid."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from pathid.dsl.loader import encode_batch, load_batch_yaml
from pathid.io import identifier_to_dict
from pathid.logging import (
    LOG_LEVEL_ENV,
    default_log_level,
    get_logger,
    parse_log_level,
    set_global_log_level,
)
from pathid.model.identifier import PathIdentifier
from pathid.types.base import OFFSET, PathOverflowError, PathParseError

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this with an ASCII ellipsis

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = []
    lines.append(format_row(clipped_headers))
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _format_rational(pid: PathIdentifier) -> str:
    numerator, denominator = pid.rational
    return f"{numerator}/{denominator}"


def _format_path(pid: PathIdentifier) -> str:
    """Return the path text, or ``(root)`` for the empty path."""
    return str(pid) if not pid.is_root else "(root)"


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value!r}")
    return number


def _log_level(value: str) -> int:
    """argparse type for log level names such as ``debug`` or ``WARNING``."""
    try:
        return parse_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _identifier_from_matrix(entries: List[int]) -> PathIdentifier:
    """Build an identifier from user-supplied matrix entries.

    The first column is decoded with Euclid's algorithm (which always
    terminates) and re-encoded; the result must reproduce all four entries.

    Raises:
        ValueError: If the entries are not an encoder-produced matrix.
    """
    a, b, c, d = entries
    try:
        pid = PathIdentifier.from_rational(a, c)
    except ValueError as e:
        raise ValueError(f"Not a valid path identifier matrix: {e}") from e
    if pid != (a, b, c, d):
        raise ValueError(
            f"Not a valid path identifier matrix: {(a, b, c, d)} "
            f"(closest encoding is {pid.as_tuple()})"
        )
    return pid


def _identifier_from_rational(numerator: int, denominator: int) -> PathIdentifier:
    """Build an identifier from a user-supplied rational and check it is reduced."""
    try:
        pid = PathIdentifier.from_rational(numerator, denominator)
    except ValueError as e:
        raise ValueError(f"Not a valid path identifier rational: {e}") from e
    if pid.rational != (numerator, denominator):
        raise ValueError(
            f"Not a valid path identifier rational: {numerator}/{denominator} "
            "is not in the encoder's reduced form"
        )
    return pid


def _encode(text: str, as_json: bool) -> None:
    """Encode dot-separated path text and print the identifier."""
    logger.debug(f"Encoding path text: {text!r}")
    try:
        pid = PathIdentifier.parse(text)
    except (PathParseError, PathOverflowError) as e:
        logger.error(f"Failed to encode path: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(identifier_to_dict(pid), indent=2))
        return

    print(f"path:     {_format_path(pid)}")
    print(f"matrix:   {pid.as_tuple()}")
    print(f"rational: {_format_rational(pid)}")


def _decode(
    rational: Optional[List[int]], matrix: Optional[List[int]], as_json: bool
) -> None:
    """Decode an identifier given in rational or matrix form and print its path."""
    try:
        if rational is not None:
            pid = _identifier_from_rational(*rational)
        elif matrix is not None:
            pid = _identifier_from_matrix(matrix)
        else:
            raise ValueError("Either a rational or a matrix identifier is required")
    except (ValueError, PathOverflowError) as e:
        logger.error(f"Failed to decode identifier: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(identifier_to_dict(pid), indent=2))
        return
    print(str(pid))


def _inspect(text: str) -> None:
    """Print the chain of convergents for a path."""
    try:
        pid = PathIdentifier.parse(text)
    except (PathParseError, PathOverflowError) as e:
        logger.error(f"Failed to inspect path: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    print("=" * 60)
    print(f"PATH: {_format_path(pid)}")
    print("=" * 60)
    print(f"   Depth:    {pid.depth}")
    print(f"   Matrix:   {pid.as_tuple()}")
    print(f"   Rational: {_format_rational(pid)}")
    print(f"   Offset:   {OFFSET}")

    rows: List[List[str]] = []
    for depth, prefix in enumerate(pid.convergents()):
        element = prefix.last
        if element is None:
            rows.append(["0", "-", "-", str(prefix.as_tuple()), "1/0"])
            continue
        rows.append(
            [
                str(depth),
                str(element),
                str(element + OFFSET),
                str(prefix.as_tuple()),
                _format_rational(prefix),
            ]
        )

    print("\nCONVERGENTS")
    print("-" * 30)
    print(_format_table(["Depth", "Element", "Term", "Matrix", "Rational"], rows))


def _run_batch(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
) -> None:
    """Encode every path listed in a YAML batch file and export JSON results.

    Args:
        path: Batch YAML file.
        results_override: Optional explicit results path. When ``None``,
            defaults to ``<batch_name>.results.json`` in the current directory.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print results to stdout.
    """
    logger.info(f"Loading batch file from: {path}")
    _start_time = perf_counter()

    try:
        data = load_batch_yaml(path.read_text())
        ids = encode_batch(data)
    except FileNotFoundError:
        logger.error(f"Batch file not found: {path}")
        print(f"❌ ERROR: Batch file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to encode batch: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to encode batch: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"Encoded {len(ids)} paths")
    results: Dict[str, Any] = {
        "source": str(path),
        "width": data.get("width"),
        "identifiers": [identifier_to_dict(pid) for pid in ids],
    }
    json_str = json.dumps(results, indent=2)

    if not no_results:
        effective_output = results_override or Path(f"{path.stem}.results.json")
        effective_output.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing results to: {effective_output}")
        effective_output.write_text(json_str)
        print(f"✅ Results written to: {effective_output}")

    if stdout:
        print(json_str)

    _elapsed = perf_counter() - _start_time
    logger.info(f"Batch completed successfully in {_format_duration(_elapsed)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathid`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathid",
        description="Encode and decode tree path identifiers.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        metavar="LEVEL",
        help=f"Log level name (default: ${LOG_LEVEL_ENV} or INFO)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{encode,decode,inspect,batch}",
        help="Available commands",
    )

    encode_parser = subparsers.add_parser(
        "encode", help="Encode dot-separated path text"
    )
    encode_parser.add_argument(
        "path", help="Path text such as 3.12.5 (empty string for the root)"
    )

    decode_parser = subparsers.add_parser(
        "decode", help="Decode an identifier back into path text"
    )
    form = decode_parser.add_mutually_exclusive_group(required=True)
    form.add_argument(
        "--rational",
        nargs=2,
        type=_non_negative_int,
        metavar=("NUM", "DEN"),
        help="Identifier in rational form",
    )
    form.add_argument(
        "--matrix",
        nargs=4,
        type=_non_negative_int,
        metavar=("A", "B", "C", "D"),
        help="Identifier in matrix form",
    )

    for p in (encode_parser, decode_parser):
        p.add_argument("--json", action="store_true", help="Print JSON output")

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the convergents of a path"
    )
    inspect_parser.add_argument("path", help="Path text such as 3.12.5")

    batch_parser = subparsers.add_parser(
        "batch", help="Encode every path listed in a YAML batch file"
    )
    batch_parser.add_argument("batch", type=Path, help="Path to batch YAML")
    batch_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to JSON file (default: <batch_name>.results.json)",
    )
    batch_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    batch_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    elif args.log_level is not None:
        set_global_log_level(args.log_level)
    else:
        set_global_log_level(default_log_level())

    if args.command == "encode":
        _encode(args.path, args.json)
    elif args.command == "decode":
        _decode(args.rational, args.matrix, args.json)
    elif args.command == "inspect":
        _inspect(args.path)
    elif args.command == "batch":
        _run_batch(
            path=args.batch,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
        )


if __name__ == "__main__":
    main()
