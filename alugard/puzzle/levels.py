from __future__ import annotations

import logging

from alugard.engine.errors import UnknownLevelError
from alugard.engine.models import LevelConfig

logger = logging.getLogger(__name__)

LEVELS: list[LevelConfig] = [
    LevelConfig(level=1, cols=4, rows=4, scatter_px=80,
                image_path="/images/level1.jpg", label="Mountain Lake"),
    LevelConfig(level=2, cols=5, rows=5, scatter_px=120,
                image_path="/images/level2.jpg", label="Coral Reef"),
    LevelConfig(level=3, cols=6, rows=6, scatter_px=160,
                image_path="/images/level3.jpg", label="Ancient Forest"),
    LevelConfig(level=4, cols=7, rows=7, scatter_px=200,
                image_path="/images/level4.jpg", label="Neon City"),
    LevelConfig(level=5, cols=8, rows=8, scatter_px=260,
                image_path="/images/level5.jpg", label="Galaxy Nebula"),
]

class LevelRegistry:
    """Level configurations keyed by level number."""

    def __init__(self) -> None:
        self._levels: dict[int, LevelConfig] = {}

    def register(self, config: LevelConfig) -> None:
        if config.level in self._levels:
            raise ValueError(f"Level {config.level} already registered")
        self._levels[config.level] = config
        logger.debug(f"Registered level {config.level} ({config.label})")

    def get(self, level: int) -> LevelConfig:
        if level not in self._levels:
            raise UnknownLevelError(level)
        return self._levels[level]

    def find(self, level: int) -> LevelConfig | None:
        return self._levels.get(level)

    def list_levels(self) -> list[LevelConfig]:
        return [self._levels[n] for n in sorted(self._levels)]

    def next_level(self, level: int) -> LevelConfig | None:
        """Return the first registered level after *level*, or None after the last."""
        for n in sorted(self._levels):
            if n > level:
                return self._levels[n]
        return None

    def __len__(self) -> int:
        return len(self._levels)


def default_registry() -> LevelRegistry:
    registry = LevelRegistry()
    for config in LEVELS:
        registry.register(config)
    return registry
