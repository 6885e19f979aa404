"""
Audit Logger for Filehand.

Provides append-only logging of every file operation with timestamps,
targets, and outcomes. This is where failures are reported; the file
operations themselves never print.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any
from enum import Enum


class ActionType(Enum):
    """Types of file operations that can be logged."""
    READ = "read"
    WRITE = "write"
    APPEND = "append"
    MODIFY = "modify"
    DELETE = "delete"
    CREATE = "create"
    LIST = "list"


class ActionStatus(Enum):
    """Outcome of an operation."""
    EXECUTED = "executed"
    FAILED = "failed"


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""
    timestamp: str
    action_type: str
    target: str
    status: str
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        target: str,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an audit entry with current timestamp."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            target=target,
            status=status.value,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        """Convert entry to JSON string."""
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        """Create entry from JSON string."""
        data = json.loads(json_str)
        return cls(**data)


class AuditLogger:
    """
    Append-only audit logger for Filehand.

    Every operation is logged to a JSONL file, one entry per call.
    """

    def __init__(self, log_path: str = "data/audit_log.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        self.log_path = Path(log_path)
        self._ensure_log_directory()

    def _ensure_log_directory(self) -> None:
        """Create the log directory and file if they don't exist."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.log_path.exists():
            self.log_path.touch()

    def log(self, entry: AuditEntry) -> None:
        """
        Append an audit entry to the log.

        Args:
            entry: The AuditEntry to log
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        target: str,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Convenience method to create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            target=target,
            status=status,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def _read_entries(self) -> List[AuditEntry]:
        entries = []

        if not self.log_path.exists():
            return entries

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    try:
                        entries.append(AuditEntry.from_json(line))
                    except (json.JSONDecodeError, TypeError):
                        continue

        return entries

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        if limit <= 0:
            return []
        return list(reversed(self._read_entries()[-limit:]))

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """
        Get audit entries filtered by action type, oldest first.

        Args:
            action_type: The ActionType to filter by
            limit: Maximum number of entries to return
        """
        matching = [e for e in self._read_entries() if e.action_type == action_type.value]
        return matching[:limit]

    def get_failed_actions(self, limit: int = 50) -> List[AuditEntry]:
        """Get operations that failed, oldest first."""
        failed = [e for e in self._read_entries() if e.status == ActionStatus.FAILED.value]
        return failed[:limit]

    def export(self, format: str = "json") -> str:
        """
        Export the entire audit log.

        Args:
            format: Export format ("json" or "csv")

        Returns:
            String containing the exported data
        """
        entries = self.get_recent(limit=10000)

        if format == "json":
            return json.dumps([asdict(e) for e in entries], indent=2)
        elif format == "csv":
            lines = ["timestamp,action_type,target,status,result"]
            for e in entries:
                lines.append(f'"{e.timestamp}","{e.action_type}","{e.target}","{e.status}","{e.result or ""}"')
            return "\n".join(lines)
        else:
            raise ValueError(f"Unsupported export format: {format}")

    def clear(self, confirm: bool = False) -> bool:
        """
        Clear the audit log.

        The current log is renamed to a timestamped backup first.

        Args:
            confirm: Must be True to actually clear the log

        Returns:
            True if cleared, False otherwise
        """
        if not confirm:
            return False

        if self.log_path.exists():
            backup_path = self.log_path.with_suffix(f".backup.{datetime.now().strftime('%Y%m%d_%H%M%S')}.jsonl")
            self.log_path.rename(backup_path)
            self.log_path.touch()
            return True

        return False
