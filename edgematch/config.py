# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Application Configuration
All settings are loaded from EDGEMATCH_* environment variables with the
reference 5x5 defaults. Override via .env, environment, or CLI flags.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EDGEMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Puzzle Shape ────────────────────────────────────────────────────────
    grid_size: int = Field(5, ge=2)
    # Highest edge label drawn by the generator (labels are 1..edge_count)
    edge_count: int = Field(6, ge=1)

    # ─── Acceptance Search ───────────────────────────────────────────────────
    # A round is accepted when its first two assemblies score <= threshold
    threshold: float = Field(0.25, ge=0.0, le=1.0)
    progress_interval: int = Field(10_000, ge=1)
    # None → fresh OS entropy every run
    seed: Optional[int] = None

    # ─── Storage ─────────────────────────────────────────────────────────────
    puzzles_dir: Path = Path("./puzzles")
    compress: bool = True

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ─── Derived helpers ─────────────────────────────────────────────────────
    @property
    def size_tag(self) -> str:
        return f"{self.grid_size}x{self.grid_size}"

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
