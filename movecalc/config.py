# movecalc/config.py
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    DISTANCE_MIN: int = 1
    DISTANCE_MAX: int = 3000
    DISTANCE_STEP: int = 10

    SWEEP_POINTS: int = 31  # samples on the Compare page chart

    model_config = SettingsConfigDict(
        env_prefix="MOVECALC_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("DISTANCE_STEP")
    @classmethod
    def _min_step(cls, v: int) -> int:
        return max(1, v)

    @field_validator("SWEEP_POINTS")
    @classmethod
    def _min_points(cls, v: int) -> int:
        return max(2, v)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.DISTANCE_MAX < self.DISTANCE_MIN:
            raise ValueError(
                f"MOVECALC_DISTANCE_MAX ({self.DISTANCE_MAX}) is below MOVECALC_DISTANCE_MIN ({self.DISTANCE_MIN})"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
