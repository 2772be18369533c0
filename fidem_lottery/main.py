#!/usr/bin/env python3
"""
Fidem Lottery Application

Main entry point: loads configuration, builds the lottery engine and runs the
terminal menu until the user quits.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .gui import LotteryMenu
from .lottery.engine import LotteryEngine
from .lottery.errors import LotteryError
from .utils.config import ConfigError, load_config, parse_lottery_config
from .utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fidem-lottery", description="Numbered-ticket lottery")
    parser.add_argument(
        "--config",
        help="Path to the JSON lottery configuration (default: $FIDEM_CONFIG, $FIDEM_CONFIGFILE or ./baseConfig.json)",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or WARNING (default: $LOG_LEVEL or INFO)")
    return parser


def create_engine(config_file: Optional[str] = None) -> LotteryEngine:
    """Load the configuration and build the engine it describes."""
    config = load_config(config_file)
    lottery_config = parse_lottery_config(config)

    logger.info("=" * 60)
    logger.info("CONFIGURATION SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Balls: {lottery_config.ball_count}")
    logger.info(f"Ticket prize: {lottery_config.ticket_prize}")
    logger.info(f"Base funds: {lottery_config.base_funds}")
    logger.info(f"Total prize ratio: {lottery_config.total_prize_ratio}")
    logger.info(f"Winner ratios: {list(lottery_config.winner_ratios)}")
    logger.info("=" * 60)

    return LotteryEngine(lottery_config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Fidem Lottery application"""
    args = build_parser().parse_args(argv)

    # Load environment variables from .env in the working directory if present
    load_dotenv(Path.cwd() / ".env")

    if args.log_level:
        set_log_level(args.log_level)

    try:
        engine = create_engine(args.config)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except LotteryError as e:
        logger.error(f"Configuration contract violation: {e}")
        return 1

    menu = LotteryMenu(engine)
    try:
        asyncio.run(menu.run())
    except KeyboardInterrupt:
        logger.info("Lottery interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
