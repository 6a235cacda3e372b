"""Configuration management."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class Config:
    """Simulation configuration."""
    # Scenario
    preset: str = "figure8"
    policy: Optional[str] = None  # None: the preset's recommended policy
    
    # Physics
    gravity: Optional[float] = None  # None: the preset's G
    softening: Optional[float] = None  # None: the preset's softening
    check_finite: bool = True
    
    # Timing
    dt: Optional[float] = None  # None: the preset's micro-step
    substeps: Optional[int] = None
    time_scale: float = 1.0
    frames: int = 500
    
    # Rendering
    render: bool = False
    show_trails: bool = True
    
    # Probe injection
    probe_at: Optional[int] = None
    probe_from: str = "Earth"
    probe_speed: float = 40.0
    probe_angle: float = 0.0
    
    # Output
    report_path: Optional[str] = None
    debug_every: int = 50
    log_level: str = "WARNING"


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
