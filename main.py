import logging
import sys

import argparse
from svcs.commands import map_command, show_help
from svcs.errors import SvcsError
from svcs.settings import is_debug_mode


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svcs", description="SVCS CLI", add_help=False)
    parser.add_argument("--help", "-h", action="store_true", help="Show the SVCS commands")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # config command
    config_parser = subparsers.add_parser("config", help="Get and set a username")
    config_parser.add_argument("name", nargs="?", default="", help="Username to store")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a file to the index")
    add_parser.add_argument("path", nargs="?", default="", help="File to track")

    # log command
    subparsers.add_parser("log", help="Show commit logs")

    # commit command
    commit_parser = subparsers.add_parser("commit", help="Save changes")
    commit_parser.add_argument("message", nargs="?", default="", help="Commit message")

    # checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Restore a file")
    checkout_parser.add_argument("snapshot_id", nargs="?", default="", help="Commit id to restore")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or is_debug_mode() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.help or not args.command:
        show_help()
        return 0

    try:
        map_command(args.command)(args)
    except SvcsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
