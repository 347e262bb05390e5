"""Application preferences (persisted to disk)."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from .presets import DetailPreset


@dataclass
class AppSettings:
    """User preferences, serialized to ~/.toolpathview/settings.json."""

    default_preset: str = DetailPreset.STANDARD.value
    max_points: int = 10000
    use_level_of_detail: bool = True

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".toolpathview" / "settings.json"

    @property
    def preset(self) -> DetailPreset:
        """The stored preset, falling back to STANDARD for unknown names."""
        try:
            return DetailPreset(self.default_preset)
        except ValueError:
            return DetailPreset.STANDARD

    def save(self, path: Optional[Path] = None) -> None:
        p = path or self.default_path()
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(asdict(self), indent=2))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppSettings":
        p = path or cls.default_path()
        if p.exists():
            data = json.loads(p.read_text())
            return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        return cls()
