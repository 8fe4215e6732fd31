"""Runtime settings loaded from settings.json."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .logger import LoggerConfig

DEFAULT_CONTENT_ROOT = Path("content")


@dataclass
class Settings:
    """Where content lives and how logging is configured."""

    content_root: Path = DEFAULT_CONTENT_ROOT
    logger: LoggerConfig = field(default_factory=lambda: LoggerConfig.from_dict({}))

    @classmethod
    def from_file(cls, settings_path: Optional[Path] = None) -> "Settings":
        settings_path = settings_path or Path("settings.json")
        if not settings_path.exists():
            return cls()
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        raw_root = data.get("contentRoot")
        content_root = Path(raw_root) if isinstance(raw_root, str) else DEFAULT_CONTENT_ROOT
        if not content_root.is_absolute():
            # Relative roots are resolved against the settings file.
            content_root = settings_path.parent / content_root
        return cls(content_root=content_root, logger=LoggerConfig.from_dict(data))


__all__ = ["Settings", "DEFAULT_CONTENT_ROOT"]
