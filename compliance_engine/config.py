"""Engine configuration with validation of the scoring constants."""
from decimal import Decimal
from functools import lru_cache
from typing import Dict, Literal

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Export .env to os.environ as well, for callers that read it directly
load_dotenv()


class Settings(BaseSettings):
    """Scoring and matching constants, overridable from the environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Compliance Scoring & Vendor Matching Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production", "test"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Weight invariants
    WEIGHT_TOLERANCE: float = Field(default=0.01, gt=0, le=0.1)

    # Evidence tier multipliers
    TIER_0_MULTIPLIER: float = Field(default=0.6, gt=0, le=1.0)
    TIER_1_MULTIPLIER: float = Field(default=0.8, gt=0, le=1.0)
    TIER_2_MULTIPLIER: float = Field(default=1.0, gt=0, le=1.0)

    # Score scales
    MAX_RAW_QUALITY_SCORE: float = Field(default=5.0, gt=0)
    MAX_OVERALL_SCORE: int = 100
    COMBINED_SCORE_CAP: int = Field(default=140, ge=100)

    # Base score component maxima (sum = 100)
    RISK_AREA_COVERAGE_MAX: int = Field(default=40, ge=0)
    SIZE_FIT_MAX: int = Field(default=20, ge=0)
    GEO_COVERAGE_MAX: int = Field(default=20, ge=0)
    PRICE_SCORE_MAX: int = Field(default=20, ge=0)
    SIZE_ADJACENT_SCORE: int = Field(default=15, ge=0)
    PRICE_TOLERANCE: float = Field(default=1.25, ge=1.0, le=2.0)

    # Priority boost maxima (sum of the rank #1 value and the others = 40)
    TOP_PRIORITY_RANK_1: int = Field(default=20, ge=0)
    TOP_PRIORITY_RANK_2: int = Field(default=15, ge=0)
    TOP_PRIORITY_RANK_3: int = Field(default=10, ge=0)
    FEATURE_BOOST_MAX: int = Field(default=10, ge=0)
    DEPLOYMENT_BOOST: int = Field(default=5, ge=0)
    SPEED_BOOST: int = Field(default=5, ge=0)

    # Implementation speed thresholds
    IMMEDIATE_TIMELINE_DAYS: int = Field(default=90, ge=1, le=365)
    DEFAULT_TIMELINE_DAYS: int = Field(default=365, ge=1)

    # Ranking defaults
    DEFAULT_MATCH_LIMIT: int = Field(default=15, ge=1, le=500)
    DEFAULT_MATCH_THRESHOLD: int = Field(default=80, ge=0, le=140)

    @model_validator(mode="after")
    def validate_tier_multipliers(self):
        """Better evidence must never be discounted more than weaker evidence."""
        if not (self.TIER_0_MULTIPLIER <= self.TIER_1_MULTIPLIER <= self.TIER_2_MULTIPLIER):
            raise ValueError(
                "Tier multipliers must be ordered TIER_0 <= TIER_1 <= TIER_2, got "
                f"{self.TIER_0_MULTIPLIER}, {self.TIER_1_MULTIPLIER}, {self.TIER_2_MULTIPLIER}"
            )
        return self

    @model_validator(mode="after")
    def validate_base_maxima(self):
        """Validate base score components sum to 100."""
        total = (
            self.RISK_AREA_COVERAGE_MAX + self.SIZE_FIT_MAX
            + self.GEO_COVERAGE_MAX + self.PRICE_SCORE_MAX
        )
        if total != 100:
            raise ValueError(f"Base score component maxima must sum to 100, got {total}")
        if self.SIZE_ADJACENT_SCORE > self.SIZE_FIT_MAX:
            raise ValueError("SIZE_ADJACENT_SCORE cannot exceed SIZE_FIT_MAX")
        return self

    @model_validator(mode="after")
    def validate_boost_maxima(self):
        """Validate priority boost maxima sum to 40 and ranks are descending."""
        if not (self.TOP_PRIORITY_RANK_1 >= self.TOP_PRIORITY_RANK_2 >= self.TOP_PRIORITY_RANK_3):
            raise ValueError("Top priority boosts must descend by rank")
        total = (
            self.TOP_PRIORITY_RANK_1 + self.FEATURE_BOOST_MAX
            + self.DEPLOYMENT_BOOST + self.SPEED_BOOST
        )
        if total != 40:
            raise ValueError(f"Priority boost maxima must sum to 40, got {total}")
        if self.COMBINED_SCORE_CAP < 100 + total:
            raise ValueError("COMBINED_SCORE_CAP must allow the maximum base plus boost")
        return self

    @property
    def tier_multipliers(self) -> Dict[str, Decimal]:
        """Tier value -> multiplier as Decimal."""
        return {
            "TIER_0": Decimal(str(self.TIER_0_MULTIPLIER)),
            "TIER_1": Decimal(str(self.TIER_1_MULTIPLIER)),
            "TIER_2": Decimal(str(self.TIER_2_MULTIPLIER)),
        }

    @property
    def speed_thresholds(self) -> Dict[str, int]:
        """Urgency value -> maximum implementation days that earns the speed boost."""
        return {"IMMEDIATE": self.IMMEDIATE_TIMELINE_DAYS}


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
