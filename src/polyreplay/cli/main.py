"""Main CLI entry point for polyreplay."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_recording
from ..exceptions import PolyreplayError
from ..models import Movement
from ..serializer import deserialize_movement, serialize_movement


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the polyreplay CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="polyreplay: Polytrack Replay Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  polyreplay --decode RECORDING          Print a recording as JSON
  polyreplay --encode movement.json      Serialize a JSON movement
  polyreplay --analyze RECORDING         Show recording sizes
  polyreplay --version                   Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--decode",
        metavar="RECORDING",
        type=str,
        help="Decode a recording string and print the movement as JSON",
    )
    group.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Serialize a JSON movement file ('-' for stdin) to a recording string",
    )
    group.add_argument(
        "--analyze",
        metavar="RECORDING",
        type=str,
        help="Decode a recording string and show its size breakdown",
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore bytes trailing the last channel instead of failing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"polyreplay {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.decode is not None:
            movement = deserialize_movement(args.decode, strict=not args.lenient)
            print(json.dumps(movement.model_dump(mode="json")))
            return 0

        if args.analyze is not None:
            movement = deserialize_movement(args.analyze, strict=not args.lenient)
            analyze_recording(args.analyze, movement)
            return 0

        if args.encode is not None:
            if args.encode == "-":
                content = sys.stdin.read()
            else:
                file_path = Path(args.encode)
                if not file_path.exists():
                    print(f"Error: File not found: {file_path}", file=sys.stderr)
                    return 1
                content = file_path.read_text()

            movement = Movement.model_validate_json(content)
            print(serialize_movement(movement))
            return 0
    except PolyreplayError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        print(f"Error: invalid movement: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
