"""Main CLI entry point for ubxgen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..config import GeneratorConfig
from ..exceptions import UbxgenError
from ..render.engine import BUILTIN_TEMPLATES, Renderer
from ..schema.loader import compile_definitions


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ubxgen CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="ubxgen",
        description="ubxgen: UBX message schema compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ubxgen python < messages.xml > messages.py            Use the bundled Python template
  ubxgen code.go.j2 --comment-prefix // -i messages.xml -o messages.go
  ubxgen --version                                      Show version
        """,
    )

    parser.add_argument(
        "template",
        metavar="TEMPLATE",
        help=f"Jinja2 template file, or a bundled template ({', '.join(sorted(BUILTIN_TEMPLATES))})",
    )

    parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        type=str,
        help="Schema document (default: standard input)",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Write generated code to FILE (default: standard output)",
    )

    parser.add_argument(
        "--comment-prefix",
        metavar="TOKEN",
        default="#",
        help="Line-comment token for the generated-file marker (default: #)",
    )

    parser.add_argument(
        "--permissive-masks",
        action="store_true",
        help="Read unparsable bit indices as 0 instead of failing",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to standard error",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ubxgen {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="ubxgen: %(message)s",
        level=logging.INFO if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        config = GeneratorConfig(
            comment_prefix=args.comment_prefix,
            strict_masks=not args.permissive_masks,
        )
    except ValueError as e:
        parser.error(str(e))

    # Everything is rendered before anything is written
    try:
        renderer = Renderer(args.template, config)
        definitions = compile_definitions(args.input if args.input else sys.stdin.buffer)
        output = renderer.render(definitions)
    except UbxgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e.strerror or e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
