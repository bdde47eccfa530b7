"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class ScoringConfig(BaseModel):
    """Time-based scoring configuration."""

    # Penalty: penalty_points for every full penalty_interval seconds
    penalty_interval: int = 10
    penalty_points: int = 2

    # Bonus on a won game: bonus_numerator / seconds, only past the threshold
    bonus_threshold: int = 30
    bonus_numerator: int = 700000


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # Shuffle seed; None for a random deal


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class SessionLogConfig(BaseModel):
    """Configuration for the JSONL session log."""

    enabled: bool = False
    output_path: str = "session_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    scoring: ScoringConfig = ScoringConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    session_log: SessionLogConfig = SessionLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
