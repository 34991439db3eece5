"""
GA configuration.

Loads the YAML configuration of the genetic search, fills in defaults and
validates parameter ranges.
"""

from typing import Dict, Any, Optional, Union
from pathlib import Path
import yaml

from .crossover import CROSSOVER_STRATEGIES

DEFAULT_CONFIG_PATH = Path(__file__).parent / "team_ga_config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'population_size': 400,
    'generations': 20,
    'mutation_rate': 0.2,
    'crossover_rate': 0.9,
    'tournament_size': 3,
    'crossover_strategy': 'order',
    'repair_children': True,
    'epsilon': 1e-4,
    'random_seed': None,
    'verbose': False,
}


class ConfigurationError(Exception):
    """Raised when GA configuration is invalid"""
    pass


def load_ga_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load GA configuration from YAML file.

    Args:
        config_path: Path to config YAML file

    Returns:
        Validated configuration dictionary with defaults filled in

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(config).__name__}")

    return merge_with_defaults(config)


def merge_with_defaults(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Combine overrides with DEFAULT_CONFIG and validate the result.

    Raises:
        ConfigurationError: If an unknown key or invalid value is given
    """
    overrides = overrides or {}

    unknown = set(overrides) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

    config = {**DEFAULT_CONFIG, **overrides}
    validate_ga_config(config)
    return config


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_ga_config(config: Dict[str, Any]) -> None:
    """
    Validate GA parameter ranges.

    Args:
        config: Complete configuration dictionary

    Raises:
        ConfigurationError: If any parameter is out of range
    """
    if not _is_int(config['population_size']) or config['population_size'] < 1:
        raise ConfigurationError(
            f"population_size must be a positive integer, got: {config['population_size']}"
        )

    if not _is_int(config['generations']) or config['generations'] < 0:
        raise ConfigurationError(
            f"generations must be a non-negative integer, got: {config['generations']}"
        )

    if not _is_int(config['tournament_size']) or config['tournament_size'] < 1:
        raise ConfigurationError(
            f"tournament_size must be a positive integer, got: {config['tournament_size']}"
        )

    for key in ('mutation_rate', 'crossover_rate'):
        value = config[key]
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0.0 <= value <= 1.0:
            raise ConfigurationError(f"{key} must be between 0 and 1, got: {value}")

    if not isinstance(config['epsilon'], (int, float)) or config['epsilon'] <= 0:
        raise ConfigurationError(f"epsilon must be positive, got: {config['epsilon']}")

    if config['crossover_strategy'] not in CROSSOVER_STRATEGIES:
        raise ConfigurationError(
            f"Unknown crossover strategy: '{config['crossover_strategy']}'. "
            f"Must be one of {list(CROSSOVER_STRATEGIES)}"
        )

    seed = config['random_seed']
    if seed is not None and (not _is_int(seed) or seed < 0):
        raise ConfigurationError(f"random_seed must be a non-negative integer or null, got: {seed}")
