from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from numplay.sequence.engine import OverflowPolicy
from numplay.sequence.prompt import InvalidIndexPolicy


class AppSettings(BaseSettings):
    """
    Global application-level configuration.

    This class is the single source of truth for:
    - environment selection
    - logging behavior
    - guessing range and RNG seed defaults
    - sequence engine width and policies
    """

    model_config = SettingsConfigDict(
        env_prefix="NUMPLAY_",
        env_file=".env",
        extra="ignore",
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "staging", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    # Interactive use: keep stderr quiet unless asked
    log_level: str = "WARNING"

    # ---- Guessing ----------------------------------------------------

    guess_low: int = Field(default=1, description="Inclusive lower bound of the secret")
    guess_high: int = Field(default=100, description="Inclusive upper bound of the secret")

    default_seed: Optional[int] = Field(
        default=None,
        description="RNG seed for guessing rounds (None draws from OS entropy)",
    )

    # ---- Sequence ----------------------------------------------------

    sequence_bits: int = Field(default=32, ge=1, description="Unsigned value width of sequence terms")
    overflow_policy: OverflowPolicy = Field(default=OverflowPolicy.RAISE)
    invalid_index_policy: InvalidIndexPolicy = Field(default=InvalidIndexPolicy.EXIT)

    @model_validator(mode="after")
    def _validate_range(self) -> "AppSettings":
        if self.guess_low > self.guess_high:
            raise ValueError(f"guess_low={self.guess_low} must be <= guess_high={self.guess_high}")
        return self


# Singleton settings object
settings = AppSettings()
