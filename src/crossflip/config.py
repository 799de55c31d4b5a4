from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .board import check_dimensions
from .rules import DEFAULT_RULE, normalize_rule


@dataclass
class GameConfig:
    rows: int = 4
    cols: int = 4
    rule: str = DEFAULT_RULE
    shuffle_steps: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        self.rows = int(self.rows)
        self.cols = int(self.cols)
        check_dimensions(self.rows, self.cols)
        normalize_rule(self.rule)
        if self.shuffle_steps is not None:
            self.shuffle_steps = int(self.shuffle_steps)
            if self.shuffle_steps < 0:
                raise ValueError("shuffle_steps must be non-negative")
        if self.seed is not None:
            self.seed = int(self.seed)

    @classmethod
    def from_dict(cls, data: dict | None) -> "GameConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown game config keys: {unknown}")
        return cls(**data)


def load_config(path: str | Path) -> GameConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return GameConfig.from_dict(cfg.get("game"))
