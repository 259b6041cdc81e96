"""Repository layout constants and environment settings."""

import os

VCS_DIR_NAME = ".vcs"
COMMITS_DIR_NAME = "commits"
INDEX_FILE_NAME = "index.txt"
LOG_FILE_NAME = "log.txt"
CONFIG_FILE_NAME = "config.txt"

# Prefix for snapshot directories that are still being written
TMP_SNAPSHOT_PREFIX = ".tmp-"

HASH_ALGORITHM = "sha256"
HASH_CHUNK_SIZE = 8192

DEBUG_ENV_VAR = "SVCS_DEBUG"


def is_debug_mode() -> bool:
    val = os.environ.get(DEBUG_ENV_VAR, "").lower()
    return val in ("1", "true", "yes", "on")
