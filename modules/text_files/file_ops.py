"""
File operations module for Filehand.

Provides text file and directory operations. Each operation returns an
OperationResult and records exactly one entry in the audit log.
"""

import os
import shutil
from pathlib import Path
from dataclasses import dataclass
from typing import List, Optional, Union

from core.config import FileHandlerConfig, load_config
from core.logger import AuditLogger, ActionType, ActionStatus
from core.results import OperationResult, FailureKind


PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class DirectoryEntry:
    """An immediate child of a listed directory."""
    name: str
    path: str
    is_dir: bool
    is_file: bool


class FileHandler:
    """Operations on text files and directories. No file state is kept between calls."""

    def __init__(
        self,
        config: Optional[FileHandlerConfig] = None,
        logger: Optional[AuditLogger] = None
    ):
        """
        Initialize FileHandler.

        Args:
            config: Settings for encoding and line terminators
            logger: Audit logger instance (created from config if omitted)
        """
        self.config = config or load_config()
        self.logger = logger or AuditLogger(self.config.audit_log)
        # Errors raised while writing audit entries, oldest first
        self.audit_errors: List[OSError] = []

    def _audit(self, action_type: ActionType, path: PathLike, status: ActionStatus,
               result: Optional[str], metadata: dict) -> None:
        # An unwritable audit log never changes the outcome of the operation.
        try:
            self.logger.log_action(
                action_type=action_type,
                target=os.fspath(path),
                status=status,
                result=result,
                metadata=metadata
            )
        except OSError as e:
            self.audit_errors.append(e)

    def _succeed(self, action_type: ActionType, path: PathLike, value=True,
                 result: Optional[str] = None, **metadata) -> OperationResult:
        self._audit(action_type, path, ActionStatus.EXECUTED, result, metadata)
        return OperationResult.ok(value)

    def _fail(self, action_type: ActionType, path: PathLike, kind: FailureKind,
              message: str, cause: Optional[BaseException] = None) -> OperationResult:
        self._audit(action_type, path, ActionStatus.FAILED, f"Error: {message}",
                    {"failure": kind.value})
        return OperationResult.fail(kind, message, cause)

    def _read_lines(self, path: PathLike) -> List[str]:
        # Universal newlines: "\n", "\r\n" and "\r" all end a line.
        with open(path, "r", encoding=self.config.encoding) as f:
            return [line[:-1] if line.endswith("\n") else line for line in f]

    def read_file(self, path: PathLike) -> OperationResult:
        """
        Read the contents of a text file.

        Every line, including the last, is followed by the configured line
        terminator, so a file without a trailing newline gains one.

        Args:
            path: Path to the file

        Returns:
            OperationResult whose value is the file content
        """
        try:
            lines = self._read_lines(path)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.READ, path, FailureKind.READ_FAILURE,
                              f"Error reading file: {e}", e)

        terminator = self.config.terminator
        content = "".join(line + terminator for line in lines)
        return self._succeed(ActionType.READ, path, content,
                             result=f"Read {len(lines)} lines")

    def write_file(self, path: PathLike, text: str) -> OperationResult:
        """
        Write text to a file, replacing any existing content.

        The text is written exactly as given. The file is created if absent.
        """
        try:
            with open(path, "w", encoding=self.config.encoding, newline="") as f:
                f.write(text)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.WRITE, path, FailureKind.WRITE_FAILURE,
                              f"Error writing to file: {e}", e)

        return self._succeed(ActionType.WRITE, path,
                             result=f"Wrote {len(text)} characters")

    def append_to_file(self, path: PathLike, text: str) -> OperationResult:
        """Append text to the end of a file, creating it if needed."""
        try:
            with open(path, "a", encoding=self.config.encoding, newline="") as f:
                f.write(text)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.APPEND, path, FailureKind.APPEND_FAILURE,
                              f"Error appending to file: {e}", e)

        return self._succeed(ActionType.APPEND, path,
                             result=f"Appended {len(text)} characters")

    def modify_file_line(self, path: PathLike, line_number: int, new_text: str) -> OperationResult:
        """
        Replace a single line in a file.

        The whole file is read, the line replaced, and the whole file
        rewritten, so the cost is proportional to the file size. Not safe
        under concurrent writers.

        Args:
            path: Path to an existing file
            line_number: Line to replace (1-based)
            new_text: Replacement text, without a line terminator

        Returns:
            OperationResult; INVALID_LINE_NUMBER leaves the file untouched
        """
        try:
            lines = self._read_lines(path)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.MODIFY, path, FailureKind.MODIFY_FAILURE,
                              f"Error modifying file (read): {e}", e)

        if (isinstance(line_number, bool) or not isinstance(line_number, int)
                or not 1 <= line_number <= len(lines)):
            return self._fail(ActionType.MODIFY, path, FailureKind.INVALID_LINE_NUMBER,
                              f"Invalid line number: {line_number} (file has {len(lines)} lines)")

        lines[line_number - 1] = new_text
        terminator = self.config.terminator

        try:
            with open(path, "w", encoding=self.config.encoding, newline="") as f:
                for line in lines:
                    f.write(line + terminator)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.MODIFY, path, FailureKind.MODIFY_FAILURE,
                              f"Error modifying file (write): {e}", e)

        return self._succeed(ActionType.MODIFY, path,
                             result=f"Replaced line {line_number}",
                             line_number=line_number)

    def delete_file(self, path: PathLike) -> OperationResult:
        """
        Delete a file or an empty directory.

        A missing path is reported as NOT_FOUND rather than treated as done.
        Non-empty directories are rejected; see remove_directory().
        """
        path_obj = Path(path)
        if not path_obj.exists() and not path_obj.is_symlink():
            return self._fail(ActionType.DELETE, path, FailureKind.NOT_FOUND,
                              f"File does not exist: {path}")

        try:
            if path_obj.is_dir() and not path_obj.is_symlink():
                path_obj.rmdir()
            else:
                path_obj.unlink()
        except (OSError, ValueError) as e:
            return self._fail(ActionType.DELETE, path, FailureKind.DELETE_FAILURE,
                              f"Failed to delete file: {path}: {e}", e)

        return self._succeed(ActionType.DELETE, path, result="Deleted")

    def remove_directory(self, path: PathLike, recursive: bool = False) -> OperationResult:
        """
        Remove a directory.

        Args:
            path: Path to the directory
            recursive: Also remove everything inside it (default: False,
                only empty directories are removed)
        """
        path_obj = Path(path)
        if not path_obj.exists():
            return self._fail(ActionType.DELETE, path, FailureKind.NOT_FOUND,
                              f"Directory does not exist: {path}")

        if not path_obj.is_dir() or path_obj.is_symlink():
            return self._fail(ActionType.DELETE, path, FailureKind.NOT_A_DIRECTORY,
                              f"Not a directory: {path}")

        try:
            if recursive:
                shutil.rmtree(path_obj)
            else:
                path_obj.rmdir()
        except (OSError, ValueError) as e:
            return self._fail(ActionType.DELETE, path, FailureKind.DELETE_FAILURE,
                              f"Failed to remove directory: {path}: {e}", e)

        return self._succeed(ActionType.DELETE, path, result="Directory removed",
                             recursive=recursive)

    def create_directory(self, path: PathLike) -> OperationResult:
        """
        Create a directory and any missing parents.

        An existing path, file or directory, is an ALREADY_EXISTS failure.
        """
        path_obj = Path(path)
        if path_obj.exists():
            return self._fail(ActionType.CREATE, path, FailureKind.ALREADY_EXISTS,
                              f"Directory already exists: {path}")

        try:
            path_obj.mkdir(parents=True)
        except (OSError, ValueError) as e:
            return self._fail(ActionType.CREATE, path, FailureKind.CREATE_FAILURE,
                              f"Failed to create directory: {path}: {e}", e)

        return self._succeed(ActionType.CREATE, path, result="Directory created")

    def list_directory(self, path: PathLike) -> OperationResult:
        """
        List the immediate contents of a directory.

        Entries come back in the order the operating system returns them.

        Returns:
            OperationResult whose value is a list of DirectoryEntry
        """
        path_obj = Path(path)

        if not path_obj.exists():
            return self._fail(ActionType.LIST, path, FailureKind.NOT_FOUND,
                              f"Directory does not exist: {path}")

        if not path_obj.is_dir():
            return self._fail(ActionType.LIST, path, FailureKind.NOT_A_DIRECTORY,
                              f"Not a directory: {path}")

        try:
            entries = [
                DirectoryEntry(
                    name=item.name,
                    path=str(item),
                    is_dir=item.is_dir(),
                    is_file=item.is_file()
                )
                for item in path_obj.iterdir()
            ]
        except (OSError, ValueError) as e:
            return self._fail(ActionType.LIST, path, FailureKind.LIST_FAILURE,
                              f"Could not list directory: {path}: {e}", e)

        return self._succeed(ActionType.LIST, path, entries,
                             result=f"{len(entries)} entries")
