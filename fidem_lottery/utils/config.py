"""
Configuration Management
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..lottery.errors import LotteryError
from ..lottery.models import LotteryConfig
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "baseConfig.json"
CONFIG_ENV = "FIDEM_CONFIG"
CONFIG_FILE_ENV = "FIDEM_CONFIGFILE"


class ConfigError(Exception):
    """Raised when the lottery configuration cannot be read or is malformed."""


class LotteryConfigModel(BaseModel):
    """Shape of the JSON configuration document."""

    # Strict: no string or bool coercion, no NaN or infinite amounts.
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True, allow_inf_nan=False)

    ball_count: int = Field(alias="ballCount", gt=0)
    ticket_prize: float = Field(alias="ticketPrize", ge=0)
    base_funds: float = Field(alias="baseFunds")
    total_prize_ratio: float = Field(alias="totalPrizeRatio")
    winner_ratios: List[float] = Field(alias="winnerRatios")


def load_config(config_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load the raw configuration mapping.

    An explicit ``config_file`` wins. Otherwise inline JSON in FIDEM_CONFIG is
    used, then the file named by FIDEM_CONFIGFILE, then ./baseConfig.json.
    """
    if config_file:
        return _read_config_file(Path(config_file))

    inline = os.environ.get(CONFIG_ENV, "")
    if inline:
        try:
            config = json.loads(inline)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {CONFIG_ENV}: {e}")
            raise ConfigError(f"Invalid JSON in {CONFIG_ENV}: {e}") from e
        logger.info(f"Loaded configuration from {CONFIG_ENV} environment variable")
        return _expect_mapping(config, CONFIG_ENV)

    return _read_config_file(Path(os.environ.get(CONFIG_FILE_ENV, "") or DEFAULT_CONFIG_FILE))


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        logger.error(f"Config file {config_file} not found")
        raise ConfigError(f"Config file {config_file} not found")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading config file {config_file}: {e}")
        raise ConfigError(f"Error loading config file {config_file}: {e}") from e

    logger.info(f"Loaded configuration from {config_file}")
    return _expect_mapping(config, str(config_file))


def _expect_mapping(config: Any, source: str) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration from {source} must be a JSON object")
    return config


def parse_lottery_config(config: Dict[str, Any]) -> LotteryConfig:
    """Validate the raw mapping and build the engine's LotteryConfig.

    Ratios are taken as given; they are not required to sum to 1.
    """
    try:
        model = LotteryConfigModel.model_validate(config)
    except ValidationError as e:
        logger.error(f"Invalid lottery configuration: {e}")
        raise ConfigError(f"Invalid lottery configuration: {e}") from e

    if len(model.winner_ratios) > model.ball_count:
        raise LotteryError.contract_violation(
            f"{len(model.winner_ratios)} prize tiers configured for only {model.ball_count} balls"
        )

    return LotteryConfig(
        ball_count=model.ball_count,
        ticket_prize=model.ticket_prize,
        base_funds=model.base_funds,
        total_prize_ratio=model.total_prize_ratio,
        winner_ratios=tuple(model.winner_ratios),
    )
