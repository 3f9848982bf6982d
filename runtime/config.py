"""
Days App Configuration

Loads settings from config/days.yaml, then applies environment overrides.
Environment variables are read from .env.local when present.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Keeps a 31-day month well inside the platform's step timeout
MAX_POST_DELAY = 1.0

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'days.yaml')


@dataclass
class DaysConfig:
    """Configuration for the days workflow"""
    post_delay: float = 0.05
    option_count: int = 14
    timezone: str = "Asia/Tokyo"
    log_level: str = "INFO"


def _validated(config: DaysConfig) -> DaysConfig:
    defaults = DaysConfig()
    if not 0 <= config.post_delay <= MAX_POST_DELAY:
        logger.warning(f"post_delay {config.post_delay} outside 0..{MAX_POST_DELAY}s. Using {defaults.post_delay}")
        config.post_delay = defaults.post_delay
    if config.option_count < 1:
        logger.warning(f"option_count {config.option_count} must be positive. Using {defaults.option_count}")
        config.option_count = defaults.option_count
    return config


def load_config_from_yaml(config_path: Optional[str] = None) -> DaysConfig:
    """Load days configuration from YAML file"""
    config_path = config_path or DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_config = yaml.safe_load(f) or {}

        config_dict = yaml_config.get('days', {})
        return _validated(DaysConfig(
            post_delay=float(config_dict.get('post_delay', 0.05)),
            option_count=int(config_dict.get('option_count', 14)),
            timezone=str(config_dict.get('timezone', 'Asia/Tokyo')),
            log_level=str(config_dict.get('log_level', 'INFO')),
        ))
    except Exception as e:
        logger.warning(f"Failed to load days config from YAML: {e}. Using defaults.")
        return DaysConfig()


def load_config() -> DaysConfig:
    """Load configuration from YAML, then environment overrides"""
    load_dotenv('.env.local', override=True)

    config = load_config_from_yaml(os.getenv('DAYS_CONFIG_PATH'))

    post_delay = os.getenv('DAYS_POST_DELAY')
    if post_delay:
        try:
            config.post_delay = float(post_delay)
        except ValueError:
            logger.warning(f"Ignoring non-numeric DAYS_POST_DELAY={post_delay!r}")

    config.timezone = os.getenv('DAYS_TIMEZONE', config.timezone)
    config.log_level = os.getenv('LOG_LEVEL', config.log_level)

    return _validated(config)
