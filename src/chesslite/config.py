"""Application settings and logging setup."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chesslite.core.enums import CastlingPolicy
from chesslite.engine.cpu import CpuPlayer, Difficulty

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """All user-configurable settings."""

    # Rules
    castling_policy: CastlingPolicy = CastlingPolicy.SIMPLIFIED

    # Computer opponent
    cpu_difficulty: Difficulty = Difficulty.INTERMEDIATE
    cpu_seed: int | None = None

    # Diagnostics
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Settings:
        """Build settings from a plain mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")

        settings = cls()
        if "castling_policy" in data:
            value = data["castling_policy"]
            try:
                settings.castling_policy = (
                    value
                    if isinstance(value, CastlingPolicy)
                    else CastlingPolicy[str(value).upper()]
                )
            except KeyError:
                raise ValueError(f"Invalid castling policy: {value!r}") from None
        if "cpu_difficulty" in data:
            value = data["cpu_difficulty"]
            try:
                settings.cpu_difficulty = Difficulty(str(value).lower())
            except ValueError:
                raise ValueError(f"Invalid CPU difficulty: {value!r}") from None
        if "cpu_seed" in data:
            seed = data["cpu_seed"]
            settings.cpu_seed = None if seed is None else int(seed)
        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level not in logging.getLevelNamesMapping():
                raise ValueError(f"Invalid log level: {data['log_level']!r}")
            settings.log_level = level
        return settings

    def make_cpu_player(self) -> CpuPlayer:
        """CPU opponent at the configured level and castling rules.

        Seeded when ``cpu_seed`` is set.
        """
        rng = random.Random(self.cpu_seed) if self.cpu_seed is not None else None
        return CpuPlayer(self.cpu_difficulty, rng, self.castling_policy)

    def setup_logging(self) -> None:
        """Install the stderr handler at ``log_level``."""
        configure_logging(self.log_level)


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stderr handler for applications embedding the engine."""
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
