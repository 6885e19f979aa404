# Filehand - Core Module
"""
Core infrastructure for Filehand.
Configuration, audit logging and result types shared by all operations.
"""

from .config import FileHandlerConfig, load_config, save_config
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus
from .results import OperationResult, FailureKind, FileOperationError

__all__ = [
    "FileHandlerConfig",
    "load_config",
    "save_config",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "OperationResult",
    "FailureKind",
    "FileOperationError",
]

__version__ = "0.1.0"
