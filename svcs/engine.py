"""Commit and checkout orchestration.

The engine is the boundary between the command layer and the repository
helpers. Expected negative results (nothing to commit, unknown id, missing
file) and I/O failures come back as result models; the helpers below it
raise.
"""

import logging
from pathlib import Path
from .change_detection import get_changed_files
from .commit_helpers import (
    append_log_entry,
    find_log_entry,
    get_last_snapshot_id,
    get_log_entries,
    new_log_entry,
)
from .errors import IOFailure, NotFoundError, PreconditionError
from .models import AddResult, CheckoutResult, CommitResult, LogEntry, Repository
from .snapshot_helpers import (
    create_snapshot,
    discard_snapshot,
    new_snapshot_id,
    restore_snapshot,
    snapshot_exists,
)
from .tracking_helpers import add_tracked_file, get_tracked_files

logger = logging.getLogger(__name__)


class VersioningEngine:
    def __init__(self, repo: Repository) -> None:
        self.repo = repo

    def tracked_files_list(self) -> list[str]:
        return get_tracked_files(self.repo)

    def add_tracked_file(self, filepath: str | Path) -> AddResult:
        try:
            added = add_tracked_file(self.repo, filepath)
        except NotFoundError as e:
            return AddResult(status="not_found", path=str(filepath), error=str(e))
        except PreconditionError as e:
            return AddResult(status="rejected", path=str(filepath), error=str(e))
        except (IOFailure, OSError) as e:
            logger.error("Could not update the index: %s", e)
            return AddResult(status="rejected", path=str(filepath), error=str(e))
        return AddResult(status="tracked" if added else "already_tracked", path=str(filepath))

    def changed_files(self) -> set[str]:
        return get_changed_files(self.repo, self.tracked_files_list(), get_last_snapshot_id(self.repo))

    def commit(self, message: str, author_name: str) -> CommitResult:
        if not message:
            return CommitResult(status="message_missing")

        try:
            changed = self.changed_files()
            log_length = len(get_log_entries(self.repo))
        except (IOFailure, OSError) as e:
            logger.error("Could not read the repository: %s", e)
            return CommitResult(status="failed", error=str(e))
        if not changed:
            return CommitResult(status="nothing_to_commit")

        snapshot_id = new_snapshot_id(log_length)
        try:
            create_snapshot(self.repo, snapshot_id, self.tracked_files_list())
        except (IOFailure, OSError) as e:
            logger.error("Commit failed: %s", e)
            return CommitResult(status="failed", error=str(e))

        # the log entry is only written once the snapshot is complete
        try:
            append_log_entry(self.repo, new_log_entry(snapshot_id, author_name, message))
        except OSError as e:
            logger.error("Commit failed while writing the log: %s", e)
            discard_snapshot(self.repo, snapshot_id)
            return CommitResult(status="failed", error=str(e))
        return CommitResult(status="committed", snapshotId=snapshot_id, changedFiles=sorted(changed))

    def checkout(self, snapshot_id: str) -> CheckoutResult:
        if not snapshot_id:
            return CheckoutResult(status="id_missing")
        try:
            if find_log_entry(self.repo, snapshot_id) is None or not snapshot_exists(self.repo, snapshot_id):
                return CheckoutResult(status="not_found", snapshotId=snapshot_id)
            restored = restore_snapshot(self.repo, snapshot_id)
        except NotFoundError:
            return CheckoutResult(status="not_found", snapshotId=snapshot_id)
        except (IOFailure, OSError) as e:
            logger.error("Checkout of %s failed: %s", snapshot_id, e)
            return CheckoutResult(status="failed", snapshotId=snapshot_id, error=str(e))
        return CheckoutResult(status="switched", snapshotId=snapshot_id, restoredFiles=restored)

    def history(self) -> list[LogEntry]:
        return list(reversed(get_log_entries(self.repo)))
