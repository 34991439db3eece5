"""
CLI module for team building.

Handles run configuration loading, validation, and mode dispatching.
"""

from typing import Dict, Any
from pathlib import Path
import yaml


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError("Configuration file must contain a mapping")

    return config


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'mode' not in config:
        raise ConfigValidationError("Missing required field: 'mode'")

    mode = config['mode']
    if mode not in ['match', 'benchmark']:
        raise ConfigValidationError(
            f"Invalid mode: '{mode}'. Must be 'match' or 'benchmark'"
        )

    if 'output' not in config:
        raise ConfigValidationError("Missing required field: 'output'")

    if not isinstance(config['output'], dict):
        raise ConfigValidationError("'output' must be a dictionary")

    if 'root' not in config['output']:
        raise ConfigValidationError("Missing required field: 'output.root'")

    if 'ga_config' in config and not Path(config['ga_config']).exists():
        raise ConfigValidationError(f"GA config not found: {config['ga_config']}")

    seed = config.get('random_seed')
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigValidationError(f"'random_seed' must be a non-negative integer, got: {seed}")

    if mode == 'match':
        _validate_match_config(config)
    elif mode == 'benchmark':
        _validate_benchmark_config(config)


def _validate_match_config(config: Dict[str, Any]) -> None:
    """
    Validate match mode configuration.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'input' not in config:
        raise ConfigValidationError("Match mode requires 'input' field")

    if not isinstance(config['input'], dict):
        raise ConfigValidationError("'input' must be a dictionary")

    for field in ['leads', 'juniors', 'lead_wishlists', 'junior_wishlists']:
        if field not in config['input']:
            raise ConfigValidationError(f"Match mode requires 'input.{field}' field")

        path = Path(config['input'][field])
        if not path.exists():
            raise ConfigValidationError(f"Input file not found: {path}")


def _validate_benchmark_config(config: Dict[str, Any]) -> None:
    """
    Validate benchmark mode configuration.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'generation' not in config:
        raise ConfigValidationError("Benchmark mode requires 'generation' field")

    generation = config['generation']
    if not isinstance(generation, dict):
        raise ConfigValidationError("'generation' must be a dictionary")

    for field in ['size', 'runs']:
        if field not in generation:
            raise ConfigValidationError(f"Benchmark mode requires 'generation.{field}' field")

        value = generation[field]
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigValidationError(
                f"'generation.{field}' must be a positive integer, got: {value}"
            )

    if 'progress_every' in generation:
        value = generation['progress_every']
        if not isinstance(value, int) or value < 0:
            raise ConfigValidationError(
                f"'generation.progress_every' must be a non-negative integer, got: {value}"
            )


def run_from_config(config_path: str) -> None:
    """
    Load run configuration and execute appropriate mode.

    This is the main entry point called by team_cli.py.

    Args:
        config_path: Path to run configuration YAML file

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
        Various exceptions from mode implementations
    """
    print(f"Loading configuration from: {config_path}")
    config = load_run_config(config_path)

    print(f"Validating configuration...")
    validate_run_config(config)

    mode = config['mode']
    print(f"Mode: {mode}\n")

    if mode == 'match':
        from .orchestration import run_match_mode
        run_match_mode(config)
    elif mode == 'benchmark':
        from .orchestration import run_benchmark_mode
        run_benchmark_mode(config)
    else:
        # Should never reach here due to validation
        raise ConfigValidationError(f"Invalid mode: {mode}")

    print("\nRun completed successfully!")
