"""Configuration models for the regret harness."""
from __future__ import annotations

from typing import List, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class EnvConfig(BaseModel):
    """Stationary reward environment the estimator is simulated against."""

    type: Literal["bernoulli", "gaussian"] = Field("bernoulli", description="Reward distribution family")
    means: List[float] = Field(..., description="Per-arm expected rewards")
    sigma: float = Field(0.1, description="Noise std for gaussian arms")
    T: int = Field(2000, description="Horizon (total pulls per seed)")

    @field_validator("means")
    @classmethod
    def _non_empty(cls, value: List[float]) -> List[float]:
        if not value:
            raise ValueError("means must list at least one arm")
        return value

    @field_validator("sigma")
    @classmethod
    def _sigma_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("sigma must be positive")
        return value

    @field_validator("T")
    @classmethod
    def _horizon_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("T must be >= 1")
        return value

    @model_validator(mode="after")
    def _check_means(self) -> "EnvConfig":
        if self.type == "bernoulli" and any(not 0.0 <= m <= 1.0 for m in self.means):
            raise ValueError("bernoulli means must lie in [0, 1]")
        if self.type == "gaussian" and any(m < 0.0 for m in self.means):
            raise ValueError("gaussian means must be non-negative")
        return self


class PlotConfig(BaseModel):
    logx: bool = False
    show_ref_sqrt: bool = True


class RegretConfig(BaseModel):
    env: EnvConfig
    seeds: List[int] = Field(default_factory=lambda: [0])
    workers: int = Field(1, description="Threads sharing one estimator")
    outdir: str = "outputs/regret"
    save_csv: bool = True
    plot: PlotConfig = Field(default_factory=PlotConfig)

    @field_validator("seeds")
    @classmethod
    def _seeds_non_empty(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("seeds must contain at least one integer")
        return value

    @field_validator("workers")
    @classmethod
    def _workers_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("workers must be >= 1")
        return value


def load_config(path: str) -> RegretConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return RegretConfig.model_validate(raw)
