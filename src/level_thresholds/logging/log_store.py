"""Log storage for level-thresholds

Resolution events are appended as JSON Lines to
<base_dir>/<log_type>_<session_id>.jsonl.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

DEFAULT_LOG_DIR = Path("./logs")

_log_store: "LogStore | None" = None


def get_log_store(base_dir: str | Path | None = None) -> "LogStore":
    """Get or create the shared LogStore

    Args:
        base_dir: Base directory for logs, used only on first call

    Returns:
        LogStore shared by loggers created without their own store
    """
    global _log_store
    if _log_store is None:
        _log_store = LogStore(base_dir)
    return _log_store


def reset_log_store() -> None:
    """Drop the shared LogStore (for testing)"""
    global _log_store
    _log_store = None


class LogStore:
    """Append-only JSON Lines files, one per log type and session

    Attributes:
        base_dir: Directory holding the log files
        session_id: Groups every entry written through this store
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        session_id: str | None = None,
    ):
        self.base_dir = Path(base_dir) if base_dir is not None else DEFAULT_LOG_DIR
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")

    def path_for(self, log_type: str) -> Path:
        return self.base_dir / f"{log_type}_{self.session_id}.jsonl"

    def write(self, log_type: str, entry: Any) -> dict:
        """Append an entry and return the stored record

        Args:
            log_type: Log name (e.g. "resolution")
            entry: Dataclass instance or mapping
        """
        record = asdict(entry) if is_dataclass(entry) else dict(entry)
        record["_log_type"] = log_type
        record["_logged_at"] = datetime.now().isoformat()

        with open(self.path_for(log_type), "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
        return record

    def read_all(self, log_type: str) -> list[dict]:
        """Records of log_type written in this session, oldest first"""
        path = self.path_for(log_type)
        if not path.exists():
            return []
        with open(path, encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
