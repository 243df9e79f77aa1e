"""
nlg/cli_frontend.py

Command-line interface for the clause realization frontend.

Typical usage:

    clause-cli realise \
        --lang en \
        --input path/to/clause.json \
        --debug

The CLI:

- Reads a JSON clause from a file (or stdin).
- Forwards it to nlg.api.realise.
- Prints the realized sentence to stdout, and optional debug info to stderr.

A clause file looks like:

    {
      "subjects": ["John"],
      "verb": "kiss",
      "object": "Mary",
      "features": {"interrogative_type": "yes_no"}
    }
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from nlg.api import realise, supported_languages
from realizer.core.domain.exceptions import DomainError
from realizer.shared.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clause-cli",
        description="CLI frontend for the clause realizer (clause -> sentence).",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Override REALIZER_LOG_LEVEL (e.g. DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `realise` command
    rea = subparsers.add_parser(
        "realise",
        help="Realise a clause given as JSON.",
    )

    rea.add_argument(
        "--lang",
        default=None,
        help=f"Target language code ({', '.join(supported_languages())}).",
    )

    rea.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help=(
            "Path to a JSON file containing the clause. "
            "If omitted or '-', read from stdin."
        ),
    )

    rea.add_argument(
        "--debug",
        action="store_true",
        help="Print the realized token sequence to stderr.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_json(path: Optional[str]) -> Dict[str, Any]:
    """
    Load a JSON object from a file or stdin.

    If path is None or '-', read from stdin.
    """
    if not path or path == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(path).read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Error: invalid JSON input ({exc}).") from exc

    if not isinstance(data, dict):
        raise SystemExit("Error: expected a JSON object at top level.")

    return data


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_realise(args: argparse.Namespace) -> int:
    """
    Handle `clause-cli realise` command.
    """
    payload = _load_json(args.input)

    try:
        result = realise(payload, lang=args.lang, debug=args.debug)
    except ValidationError as exc:
        raise SystemExit(f"Error: invalid clause ({exc.error_count()} problems).\n{exc}") from exc
    except DomainError as exc:
        raise SystemExit(f"Error: {exc.message}") from exc

    # Main output: realized text
    print(result.text)

    # Optional debug output to stderr
    if args.debug and result.debug_info is not None:
        debug_serialized = json.dumps(
            result.debug_info,
            indent=2,
            ensure_ascii=False,
        )
        print("\n[DEBUG]", file=sys.stderr)
        print(debug_serialized, file=sys.stderr)

    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    if args.command == "realise":
        exit_code = _cmd_realise(args)
    else:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
