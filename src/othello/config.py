"""
Configuration parameters for the Othello front ends.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

from .game.board import EMPTY, Player


@dataclass
class DisplayConfig:
    """Configuration for text rendering of the board."""
    empty_symbol: str = "."
    black_symbol: str = "B"
    white_symbol: str = "W"
    hint_symbol: str = "*"
    show_hints: bool = True  # Mark the current player's valid moves

    def symbols(self) -> Dict[int, str]:
        """Symbol mapping in the form Board.render expects."""
        return {
            EMPTY: self.empty_symbol,
            Player.BLACK: self.black_symbol,
            Player.WHITE: self.white_symbol,
        }


@dataclass
class BenchmarkConfig:
    """Configuration for random playout benchmarks."""
    num_games: int = 100
    seed: Optional[int] = 42
    progress: bool = True  # Show a progress bar


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            display=DisplayConfig(**config_dict.get('display', {})),
            benchmark=BenchmarkConfig(**config_dict.get('benchmark', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()


def load_config(filepath: Optional[str]) -> Config:
    """Load config from filepath if it exists, otherwise return the defaults."""
    if filepath and os.path.exists(filepath):
        return Config.load(filepath)
    return get_default_config()
