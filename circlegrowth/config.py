"""
Configuration handling for circlegrowth
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from circlegrowth.geometry import RADIUS, SELECTION_MULTIPLIER, TOLERANCE

SEED_MODES = ("corner", "corners")


@dataclass
class EngineConfig:
    """Configuration for the intersection engine"""

    radius: float = RADIUS
    tolerance: float = TOLERANCE

    # Candidate selection: index = (step * multiplier) % candidate_count
    selection_multiplier: int = SELECTION_MULTIPLIER

    # Legacy variants, both off by default
    check_bounds: bool = True
    place_all_candidates: bool = False

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"radius must be > 0, got {self.radius}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")


@dataclass
class HostConfig:
    """Configuration for the scheduler loop"""

    step_delay: float = 2.0  # seconds between ticks

    # "corner" seeds (0, 0) only, "corners" seeds all four viewport corners
    seed_mode: str = "corner"

    # Restart from the seed whenever the viewport is resized
    reseed_on_resize: bool = False

    def __post_init__(self):
        if self.seed_mode not in SEED_MODES:
            raise ValueError(
                f"seed_mode must be one of {', '.join(SEED_MODES)}, got {self.seed_mode!r}"
            )
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {self.step_delay}")


@dataclass
class RenderConfig:
    """Configuration for drawing the circles"""

    hue: float = 200.0
    ring_fractions: List[float] = field(default_factory=lambda: [1.0, 0.75, 0.5])
    line_width: float = 1.0
    background: str = "white"
    dpi: int = 100


@dataclass
class Config:
    """Master configuration for circlegrowth"""

    log_level: str = "INFO"
    log_dir: Optional[str] = None

    engine: EngineConfig = field(default_factory=EngineConfig)
    host: HostConfig = field(default_factory=HostConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a YAML file"""
        with open(path, "r") as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        config = Config()

        for key, value in config_dict.items():
            if key not in ["engine", "host", "render"] and hasattr(config, key):
                setattr(config, key, value)

        if "engine" in config_dict:
            config.engine = EngineConfig(**config_dict["engine"])
        if "host" in config_dict:
            config.host = HostConfig(**config_dict["host"])
        if "render" in config_dict:
            config.render = RenderConfig(**config_dict["render"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary"""
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        return Config.from_yaml(config_path)
    return Config()
