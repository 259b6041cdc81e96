import logging
import time
from pydantic import ValidationError
from .errors import CorruptLogError, IOFailure
from .models import LogEntry, Repository

logger = logging.getLogger(__name__)


def get_log_entries(repo: Repository) -> list[LogEntry]:
    if not repo.log_path.exists():
        return []
    try:
        lines = repo.log_path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise CorruptLogError(f"{repo.log_path}: log is not valid UTF-8") from e
    except OSError as e:
        raise IOFailure(f"could not read {repo.log_path}: {e}") from e

    entries: list[LogEntry] = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            entries.append(LogEntry.model_validate_json(line))
        except ValidationError as e:
            raise CorruptLogError(f"{repo.log_path}:{line_number}: unreadable log entry") from e
    return entries


def append_log_entry(repo: Repository, entry: LogEntry) -> None:
    # one JSON object per line; json escapes newlines in messages
    with open(repo.log_path, "a", encoding="utf-8") as f:
        f.write(entry.model_dump_json() + "\n")
    logger.info("Appended log entry for snapshot %s", entry.snapshotId)


def new_log_entry(snapshot_id: str, author: str, message: str) -> LogEntry:
    return LogEntry(
        snapshotId=snapshot_id,
        author=author,
        message=message,
        timestamp=int(time.time()),
    )


def find_log_entry(repo: Repository, snapshot_id: str) -> LogEntry | None:
    for entry in get_log_entries(repo):
        if entry.snapshotId == snapshot_id:
            return entry
    return None


def get_last_snapshot_id(repo: Repository) -> str | None:
    entries = get_log_entries(repo)
    if not entries:
        return None
    return entries[-1].snapshotId
