"""Game settings, validated with pydantic and loadable from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

HAND_SIZE_CHOICES: tuple[int, ...] = (5, 6, 7)


class GameConfig(BaseModel):
    hand_size: int = 7
    opponent_name: str = "Computer"
    rng_seed: Optional[int] = None

    @field_validator("hand_size")
    @classmethod
    def _check_hand_size(cls, v: int) -> int:
        if v not in HAND_SIZE_CHOICES:
            raise ValueError(f"hand_size must be one of {HAND_SIZE_CHOICES}, got {v}")
        return v

    @field_validator("opponent_name")
    @classmethod
    def _check_opponent_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("opponent_name must not be blank")
        return v


def load_config(path: str | Path) -> GameConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return GameConfig.model_validate(raw)
