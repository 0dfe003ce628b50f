# src/blogcred/core/config.py

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

logger = logging.getLogger(__name__)


class WeightsConfig(BaseModel):
    language: float = Field(0.20, ge=0, le=1)
    sources: float = Field(0.30, ge=0, le=1)
    keywords: float = Field(0.20, ge=0, le=1)
    structure: float = Field(0.15, ge=0, le=1)
    category: float = Field(0.15, ge=0, le=1)

    @model_validator(mode="after")
    def check_total(self) -> "WeightsConfig":
        total = self.language + self.sources + self.keywords + self.structure + self.category
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Analyzer weights must sum to 1.0 (got {total:.3f})")
        return self

    class Config:
        frozen = True


class ScoringConfig(BaseModel):
    weights: WeightsConfig = Field(default_factory=WeightsConfig)
    approve_threshold: int = Field(80, ge=0, le=100)
    review_threshold: int = Field(60, ge=0, le=100)
    no_source_score: int = Field(50, ge=0, le=100)
    low_credibility_threshold: int = Field(60, ge=0, le=100)

    @field_validator("approve_threshold", "review_threshold", mode="before")
    @classmethod
    def load_thresholds_from_env(cls, v: Any, info: ValidationInfo) -> Any:
        """Override thresholds with environment variables if present."""
        env_name = f"BLOGCRED_{info.field_name.upper()}"
        if env_name in os.environ:
            return int(os.environ[env_name])
        return v

    @model_validator(mode="after")
    def check_threshold_order(self) -> "ScoringConfig":
        if self.review_threshold > self.approve_threshold:
            raise ValueError("review_threshold must not exceed approve_threshold")
        return self

    class Config:
        frozen = True
        validate_default = True


class ModerationConfig(BaseModel):
    excerpt_length: int = Field(150, gt=0)
    words_per_minute: int = Field(200, gt=0)
    default_image_url: str = (
        "https://images.pexels.com/photos/1181671/pexels-photo-1181671.jpeg"
    )


class BlogCredConfig(BaseModel):
    """
    Main configuration model for blogcred.
    """

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    moderation: ModerationConfig = Field(default_factory=ModerationConfig)

    class Config:
        populate_by_name = True


def load_config(config_path: Optional[Union[str, Path]] = None) -> BlogCredConfig:
    """
    Load blogcred configuration from YAML file.

    Args:
        config_path: Path to config.yaml (default: ./config/config.yaml)

    Returns:
        Validated BlogCredConfig instance.
    """
    if config_path is None:
        config_path = Path("config") / "config.yaml"
    else:
        config_path = Path(config_path)

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            logger.info(f"Loaded configuration from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")
    else:
        logger.info(f"Config file not found at {config_path}, using defaults")

    # Create config instance (env vars override file)
    config = BlogCredConfig(**config_data)

    logger.debug("blogcred configuration loaded with settings:")
    logger.debug(f"  Weights: {config.scoring.weights.model_dump()}")
    logger.debug(
        f"  Thresholds: approve>={config.scoring.approve_threshold}, "
        f"review>={config.scoring.review_threshold}"
    )

    return config
