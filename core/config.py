"""
Configuration for Filehand.

Settings live in a YAML file under a top-level ``filehand`` key.
Missing or unreadable files fall back to the defaults.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any
import yaml


LINE_TERMINATORS = {
    "native": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


@dataclass
class FileHandlerConfig:
    """Settings shared by all file operations."""
    encoding: str = "utf-8"
    line_terminator: str = "native"
    audit_log: str = "data/audit_log.jsonl"

    def __post_init__(self):
        if self.line_terminator not in LINE_TERMINATORS:
            raise ValueError(
                f"Unknown line_terminator '{self.line_terminator}', "
                f"expected one of: {', '.join(LINE_TERMINATORS)}"
            )

    @property
    def terminator(self) -> str:
        """The actual characters written after each line."""
        return LINE_TERMINATORS[self.line_terminator]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return FileHandlerConfig().to_dict()


def load_config(config_path: str = "config.yaml") -> FileHandlerConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        FileHandlerConfig with file values layered over the defaults
    """
    path = Path(config_path)
    settings = _default_config()

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                section = data.get("filehand", data) or {}
                for key in settings:
                    if key in section:
                        settings[key] = section[key]
        except (OSError, yaml.YAMLError):
            pass

    return FileHandlerConfig(**settings)


def save_config(config: FileHandlerConfig, config_path: str = "config.yaml") -> None:
    """Save settings, keeping any other sections already in the file."""
    path = Path(config_path)
    data: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                existing = yaml.safe_load(f) or {}
            if isinstance(existing, dict):
                data = existing
        except (OSError, yaml.YAMLError):
            pass

    data["filehand"] = config.to_dict()

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False)
