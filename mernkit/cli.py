"""Command line entry point.

Usage::

    mernkit create my-app
    python -m mernkit create my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from mernkit import __version__
from mernkit.config import Config
from mernkit.provisioner import Provisioner
from mernkit.utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mernkit",
        description="mernkit -- scaffold a MERN project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mernkit create my-app\n"
            "  python -m mernkit create my-app\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    create = subparsers.add_parser(
        "create",
        help="Create a new MERN project",
        description="Create a new MERN project in the current directory",
    )
    create.add_argument("project_name", metavar="projectName", help="Name of the project directory")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``mernkit``."""
    args = build_parser().parse_args(argv)

    config = Config(project_name=args.project_name, base_dir=Path.cwd())
    try:
        result = asyncio.run(Provisioner(config).run())
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(130)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
