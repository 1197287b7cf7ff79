"""Configuration dataclasses and YAML loader for the SIR meeple simulation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from pathlib import Path
import math
import yaml


class ConfigError(ValueError):
    """Raised when a configuration value would make the simulation undefined."""


@dataclass
class ArenaConfig:
    center: Tuple[float, float] = (0.0, 0.0)
    width: float = 500.0
    height: float = 500.0


@dataclass
class AgentConfig:
    speed: float = 4.0
    wander_step: float = 40.0  # re-target offset and boundary nudge


@dataclass
class DiseaseConfig:
    contact_radius: float = 8.0
    transmission_probability: float = 0.05   # per tick, per in-range pair
    initial_infected_probability: float = 0.01


@dataclass
class PaletteConfig:
    """RGB marker colors, one per infection status."""
    susceptible: Tuple[float, float, float] = (0.1, 0.4, 0.5)  # blue
    infected: Tuple[float, float, float] = (0.8, 0.0, 0.0)     # red
    recovered: Tuple[float, float, float] = (0.3, 0.4, 0.3)    # green


@dataclass
class SimulationConfig:
    population: int = 1000
    max_steps: Optional[int] = 2000  # None runs until interrupted
    dt: float = 1.0 / 60.0
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    agents: AgentConfig = field(default_factory=AgentConfig)
    disease: DiseaseConfig = field(default_factory=DiseaseConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)

    quiet: bool = False
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ConfigError for any value outside its allowed range."""
        if self.population <= 0:
            raise ConfigError(f"population must be positive, got {self.population}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ConfigError(f"max_steps must be >= 0, got {self.max_steps}")
        _require_positive('dt', self.dt)
        _require_positive('agents.speed', self.agents.speed)
        _require_positive('agents.wander_step', self.agents.wander_step)
        _require_positive('arena.width', self.arena.width)
        _require_positive('arena.height', self.arena.height)
        if len(self.arena.center) != 2 or not all(math.isfinite(c) for c in self.arena.center):
            raise ConfigError(f"arena.center must be a finite (x, y) pair, got {self.arena.center}")
        if not math.isfinite(self.disease.contact_radius) or self.disease.contact_radius < 0:
            raise ConfigError(
                f"disease.contact_radius must be >= 0, got {self.disease.contact_radius}")
        _require_probability('disease.transmission_probability',
                             self.disease.transmission_probability)
        _require_probability('disease.initial_infected_probability',
                             self.disease.initial_infected_probability)
        for name in ('susceptible', 'infected', 'recovered'):
            color = getattr(self.palette, name)
            if len(color) != 3 or not all(0.0 <= c <= 1.0 for c in color):
                raise ConfigError(f"palette.{name} must be 3 values in [0, 1], got {color}")


def _require_positive(name: str, value: float) -> None:
    # rejects NaN and inf too
    if not (math.isfinite(value) and value > 0):
        raise ConfigError(f"{name} must be positive, got {value}")


def _require_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"{name} must be in [0, 1], got {value}")


def _as_float(section: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{section}.{key} must be a number, got {value!r}")
    return float(value)


def _as_color(key: str, value: Any) -> Tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigError(f"palette.{key} must be a list of 3 numbers, got {value!r}")
    return tuple(_as_float('palette', key, c) for c in value)


def _section(raw: Dict, name: str) -> Dict:
    """Return a top-level section, treating an absent or empty one as {}."""
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__}")
    return section


def _parse_arena(arena_raw: Dict) -> ArenaConfig:
    """Parse the arena as a square (side_length) or a rectangle (width/height)."""
    center_raw = arena_raw.get('center', [0.0, 0.0])
    if not isinstance(center_raw, (list, tuple)) or len(center_raw) != 2:
        raise ConfigError(f"arena.center must be a list of 2 numbers, got {center_raw!r}")
    center = (_as_float('arena', 'center', center_raw[0]),
              _as_float('arena', 'center', center_raw[1]))

    if 'side_length' in arena_raw:
        if 'width' in arena_raw or 'height' in arena_raw:
            raise ConfigError("arena takes either side_length or width/height, not both")
        side = _as_float('arena', 'side_length', arena_raw['side_length'])
        return ArenaConfig(center=center, width=side, height=side)

    defaults = ArenaConfig()
    return ArenaConfig(
        center=center,
        width=_as_float('arena', 'width', arena_raw.get('width', defaults.width)),
        height=_as_float('arena', 'height', arena_raw.get('height', defaults.height))
    )


def _parse_palette(palette_raw: Dict) -> PaletteConfig:
    defaults = PaletteConfig()
    return PaletteConfig(
        susceptible=_as_color('susceptible', palette_raw.get('susceptible', defaults.susceptible)),
        infected=_as_color('infected', palette_raw.get('infected', defaults.infected)),
        recovered=_as_color('recovered', palette_raw.get('recovered', defaults.recovered))
    )


def config_from_dict(raw: Optional[Dict]) -> SimulationConfig:
    """Build and validate a SimulationConfig from parsed YAML data.

    Missing sections and keys fall back to the dataclass defaults.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"top-level configuration must be a mapping, got {type(raw).__name__}")

    sim_raw = _section(raw, 'simulation')
    agents_raw = _section(raw, 'agents')
    disease_raw = _section(raw, 'disease')
    defaults = SimulationConfig()

    population = sim_raw.get('population', defaults.population)
    if isinstance(population, bool) or not isinstance(population, int):
        raise ConfigError(f"simulation.population must be an integer, got {population!r}")

    max_steps = sim_raw.get('max_steps', defaults.max_steps)
    if max_steps is not None and (isinstance(max_steps, bool) or not isinstance(max_steps, int)):
        raise ConfigError(f"simulation.max_steps must be an integer or null, got {max_steps!r}")

    seed = sim_raw.get('seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"simulation.seed must be an integer or null, got {seed!r}")

    agents = AgentConfig(
        speed=_as_float('agents', 'speed', agents_raw.get('speed', AgentConfig.speed)),
        wander_step=_as_float('agents', 'wander_step',
                              agents_raw.get('wander_step', AgentConfig.wander_step))
    )

    disease = DiseaseConfig(
        contact_radius=_as_float(
            'disease', 'contact_radius',
            disease_raw.get('contact_radius', DiseaseConfig.contact_radius)),
        transmission_probability=_as_float(
            'disease', 'transmission_probability',
            disease_raw.get('transmission_probability', DiseaseConfig.transmission_probability)),
        initial_infected_probability=_as_float(
            'disease', 'initial_infected_probability',
            disease_raw.get('initial_infected_probability',
                            DiseaseConfig.initial_infected_probability))
    )

    config = SimulationConfig(
        population=population,
        max_steps=max_steps,
        dt=_as_float('simulation', 'dt', sim_raw.get('dt', defaults.dt)),
        arena=_parse_arena(_section(raw, 'arena')),
        agents=agents,
        disease=disease,
        palette=_parse_palette(_section(raw, 'palette')),
        seed=seed
    )
    config.validate()
    return config


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

    return config_from_dict(raw)
