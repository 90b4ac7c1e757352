"""Configuration — weight budget, tolerance, default method, tie-breaking."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.ranking.models import DecisionMethod

TieBreak = Literal["input_order", "candidate_id"]


class Settings(BaseSettings):
    weight_total: float = Field(default=100.0, gt=0.0)
    weight_tolerance: float = Field(default=0.01, gt=0.0)

    default_method: DecisionMethod = DecisionMethod.WPM
    tie_break: TieBreak = "input_order"

    model_config = SettingsConfigDict(
        env_prefix="RANKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
