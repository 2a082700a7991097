"""Configuration dataclasses and YAML loader for the cave steering simulation."""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from pathlib import Path
import yaml

from .errors import InvalidParameterError
from .model.steering import BEHAVIOURS


@dataclass
class CaveConfig:
    width: int
    height: int
    alive_chance: float = 0.4   # initial solid-cell probability
    death_limit: int = 3
    birth_limit: int = 4
    step_count: int = 2         # smoothing passes
    regenerate_attempts: int = 5


@dataclass
class SteeringConfig:
    max_speed: float = 1.0
    arrive_distance: float = 0.0
    depart_distance: float = 0.0
    learning_rate: float = 0.01
    weight_scale: float = 0.1   # initial weights drawn from [-scale, scale)
    goal_radius: float = 0.5


@dataclass
class AgentConfig:
    count: int
    behaviours: List[str] = field(default_factory=lambda: ["seek"])


@dataclass
class SimulationConfig:
    cave: CaveConfig
    steering: SteeringConfig
    agents: AgentConfig
    max_steps: int
    time_step: float = 1.0

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    grid_enabled: bool = True
    quiet: bool = False
    seed: Optional[int] = None
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_behaviours(raw: List[str]) -> List[str]:
    """Validate behaviour names against the steering registry."""
    behaviours = [str(b).lower() for b in raw]
    if not behaviours:
        raise InvalidParameterError("At least one behaviour is required")
    for name in behaviours:
        if name not in BEHAVIOURS:
            raise InvalidParameterError(f"Unknown behaviour: {name}")
    return behaviours


def parse_config(raw: Dict[str, Any]) -> SimulationConfig:
    """Build a SimulationConfig from already-parsed YAML data."""
    # Parse cave config
    cave_raw = raw['cave']
    cave = CaveConfig(
        width=cave_raw['width'],
        height=cave_raw['height'],
        alive_chance=cave_raw.get('alive_chance', 0.4),
        death_limit=cave_raw.get('death_limit', 3),
        birth_limit=cave_raw.get('birth_limit', 4),
        step_count=cave_raw.get('step_count', 2),
        regenerate_attempts=cave_raw.get('regenerate_attempts', 5)
    )

    # Parse steering config
    st_raw = raw.get('steering', {})
    steering = SteeringConfig(
        max_speed=st_raw.get('max_speed', 1.0),
        arrive_distance=st_raw.get('arrive_distance', 0.0),
        depart_distance=st_raw.get('depart_distance', 0.0),
        learning_rate=st_raw.get('learning_rate', 0.01),
        weight_scale=st_raw.get('weight_scale', 0.1),
        goal_radius=st_raw.get('goal_radius', 0.5)
    )

    # Parse agent config
    agents_raw = raw['agents']
    agents = AgentConfig(
        count=agents_raw['count'],
        behaviours=_parse_behaviours(agents_raw.get('behaviours', ['seek']))
    )

    sim_raw = raw['simulation']

    # Parse export config (optional)
    export_raw = raw.get('export', {})

    return SimulationConfig(
        cave=cave,
        steering=steering,
        agents=agents,
        max_steps=sim_raw['max_steps'],
        time_step=sim_raw.get('time_step', 1.0),
        csv_enabled=export_raw.get('csv', True),
        grid_enabled=export_raw.get('grid', True),
        seed=sim_raw.get('seed')
    )


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return parse_config(raw)
