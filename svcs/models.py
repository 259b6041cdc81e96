from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .settings import (
    COMMITS_DIR_NAME,
    CONFIG_FILE_NAME,
    INDEX_FILE_NAME,
    LOG_FILE_NAME,
    VCS_DIR_NAME,
)


class Repository(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path

    @property
    def vcs_dir(self) -> Path:
        return self.root / VCS_DIR_NAME

    @property
    def commits_dir(self) -> Path:
        return self.vcs_dir / COMMITS_DIR_NAME

    @property
    def index_path(self) -> Path:
        return self.vcs_dir / INDEX_FILE_NAME

    @property
    def log_path(self) -> Path:
        return self.vcs_dir / LOG_FILE_NAME

    @property
    def config_path(self) -> Path:
        return self.vcs_dir / CONFIG_FILE_NAME


class LogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    snapshotId: str
    author: str
    message: str
    timestamp: int = 0


class AddResult(BaseModel):
    status: Literal["tracked", "already_tracked", "not_found", "rejected"]
    path: str
    error: str | None = None


class CommitResult(BaseModel):
    status: Literal["committed", "nothing_to_commit", "message_missing", "failed"]
    snapshotId: str | None = None
    changedFiles: list[str] = []
    error: str | None = None


class CheckoutResult(BaseModel):
    status: Literal["switched", "not_found", "id_missing", "failed"]
    snapshotId: str = ""
    restoredFiles: list[str] = []
    error: str | None = None
