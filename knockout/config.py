"""Tournament runner configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from .schemas import TournamentConfig
from .utils import load_json

CONFIG_ENV_VAR = 'KNOCKOUT_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'tournament_config.json'

logger = logging.getLogger('knockout.config')


@lru_cache(maxsize=1)
def get_config() -> TournamentConfig:
    """
    Load runner configuration from data/tournament_config.json.

    The KNOCKOUT_CONFIG environment variable overrides the path. When it is
    unset and the default file is missing, built-in defaults are used.
    Configuration is cached after first load.

    Returns:
        TournamentConfig object with validated settings

    Raises:
        FileNotFoundError: If KNOCKOUT_CONFIG names a file that doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from knockout.config import get_config
        config = get_config()
        print(f"Service: {config.service_url}")
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return load_json(Path(override), schema=TournamentConfig)

    if not DEFAULT_CONFIG_PATH.exists():
        logger.debug(f'No config file at {DEFAULT_CONFIG_PATH}, using defaults')
        return TournamentConfig()

    return load_json(DEFAULT_CONFIG_PATH, schema=TournamentConfig)


def get_service_url() -> str:
    """Get the data service base URL from config."""
    return get_config().service_url


def get_max_teams_per_tournament() -> int:
    """Get the maximum number of teams allowed in a tournament."""
    return get_config().max_teams_per_tournament


def get_request_timeout() -> float:
    """Get the HTTP request timeout in seconds."""
    return get_config().request_timeout


def get_parallel_matches() -> bool:
    """Get whether matches within a round are resolved concurrently."""
    return get_config().parallel_matches


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or KNOCKOUT_CONFIG changes during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
