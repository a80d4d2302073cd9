"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory, then the project root.
Missing sections and keys fall back to defaults; unknown keys are ignored.
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict


@dataclass
class GameConfig:
    """Game loop timing and board settings."""
    tick_interval_ms: int = 50
    exit_grace_ms: int = 100
    status_rows: int = 1
    seed: Optional[int] = None


@dataclass
class DisplayConfig:
    """Terminal drawing settings."""
    snake_color: str = "green"
    food_color: str = "red"
    background_color: str = "black"
    show_debug: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/termsnake.log"


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def validate_config(config: Config) -> Config:
    """
    Check values the game loop cannot run with.

    Raises:
        ValueError: On a non-positive tick interval, negative exit grace,
            negative status rows or unknown log level
    """
    game = config.game
    if game.tick_interval_ms <= 0:
        raise ValueError(f"game.tick_interval_ms must be positive, got {game.tick_interval_ms}")
    if game.exit_grace_ms < 0:
        raise ValueError(f"game.exit_grace_ms must not be negative, got {game.exit_grace_ms}")
    if game.status_rows < 0:
        raise ValueError(f"game.status_rows must not be negative, got {game.status_rows}")

    level = str(config.logging.level).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"logging.level must be a standard level name, got {config.logging.level}")

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or project root)

    Returns:
        Validated Config object
    """
    # Find config file
    if config_path is None:
        possible_paths = [
            Path("config.yaml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]

        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    if config_path is None or not Path(config_path).exists():
        print("[Config] No config file found, using defaults")
        return Config()

    # Load YAML
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    # Build config object
    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return validate_config(config)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
