from .errors import SvcsError
from typing import Callable
import time
from pathlib import Path
from .repo_utils import open_repository
from .config_helpers import get_username, set_username
from .engine import VersioningEngine

HELP_TEXT = """These are SVCS commands:
config      Get and set a username.
add         Add a file to the index.
log         Show commit logs.
commit      Save changes.
checkout    Restore a file."""


def map_command(command: str) -> Callable:
    commandsMap = {
        "config": config,
        "add": add,
        "log": log,
        "commit": commit,
        "checkout": checkout,
    }
    if command not in commandsMap:
        raise SvcsError(f"'{command}' is not a SVCS command.")
    return commandsMap[command]


def show_help() -> None:
    print(HELP_TEXT)


def config(args):
    repo = open_repository()
    if args.name:
        set_username(repo, args.name)
    username = get_username(repo)
    if username is None:
        print("Please, tell me who you are.")
        return
    print(f"The username is {username}.")


def add(args):
    engine = VersioningEngine(open_repository())
    if not args.path:
        tracked_files = engine.tracked_files_list()
        if not tracked_files:
            print("Add a file to the index.")
            return
        print("Tracked files:")
        for filepath in tracked_files:
            print(filepath)
        return

    # paths on the command line are relative to where the user is
    result = engine.add_tracked_file(Path.cwd() / args.path)
    if result.status == "not_found":
        print(f"Can't find '{args.path}'.")
    elif result.status == "rejected":
        raise SvcsError(result.error or f"cannot track '{args.path}'")
    else:
        print(f"The file '{args.path}' is tracked.")


def log(args):
    engine = VersioningEngine(open_repository())
    history = engine.history()
    if not history:
        print("No commits yet.")
        return
    for entry in history:
        print(f"commit {entry.snapshotId}")
        print(f"Author: {entry.author}")
        if entry.timestamp:
            print(f"Date: {time.ctime(entry.timestamp)}")
        print(f"{entry.message}\n")


def commit(args):
    repo = open_repository()
    if not args.message:
        print("Message was not passed.")
        return
    author = get_username(repo)
    if author is None:
        print("Please, tell me who you are.")
        return

    result = VersioningEngine(repo).commit(args.message, author)
    if result.status == "message_missing":
        print("Message was not passed.")
    elif result.status == "nothing_to_commit":
        print("Nothing to commit.")
    elif result.status == "failed":
        raise SvcsError(f"commit failed: {result.error}")
    else:
        print("Changes are committed.")


def checkout(args):
    engine = VersioningEngine(open_repository())
    result = engine.checkout(args.snapshot_id or "")
    if result.status == "id_missing":
        print("Commit id was not passed.")
    elif result.status == "not_found":
        print("Commit does not exist.")
    elif result.status == "failed":
        raise SvcsError(f"checkout failed: {result.error}")
    else:
        print(f"Switched to commit {result.snapshotId}.")
