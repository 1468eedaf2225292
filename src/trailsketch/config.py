from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

SKETCH_MODES = ("walkers", "strips")
BOUNDARY_MODES = ("reflect", "repel")
BOUNDARY_CHECKS = ("candidate", "current")


@dataclass
class DomainConfig:
    width: float = 1200.0
    height: float = 1200.0 * 9.0 / 16.0


@dataclass
class DynamicsConfig:
    personal_space: float = 20.0
    max_effective_distance: float = 100.0
    max_force: float = 1.0
    # Share of a pair's force that reaches the pushed walker.
    energetic: float = 0.5
    # Inverse mass applied by apply_force.
    force_scale: float = 10.0
    max_acceleration: float = 25.0
    max_speed: float = 5.0
    damp: float = 0.75
    boundary_mode: str = "reflect"
    boundary_check: str = "candidate"
    edge_weight: float = 0.5


@dataclass
class PopulationConfig:
    min_walkers: int = 10
    max_walkers: int = 50
    max_path_length: int = 120
    initial_speed: float = 2.0
    direction_bias: float = 0.2


@dataclass
class StripsConfig:
    max_frequency: float = 3.0
    strip_width: float = 400.0
    samples: int = 1000
    amplitude: float = 100.0


@dataclass
class CaptureConfig:
    root: Path = Path("captures")
    extension: str = "png"


@dataclass
class SketchConfig:
    mode: str = "walkers"
    seed: Optional[int] = None
    fps: int = 60
    debug: bool = False
    domain: DomainConfig = field(default_factory=DomainConfig)
    dynamics: DynamicsConfig = field(default_factory=DynamicsConfig)
    population: PopulationConfig = field(default_factory=PopulationConfig)
    strips: StripsConfig = field(default_factory=StripsConfig)
    capture: CaptureConfig = field(default_factory=CaptureConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SketchConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)

    def validate(self) -> "SketchConfig":
        if self.mode not in SKETCH_MODES:
            raise ValueError(f"Unknown sketch mode: {self.mode}")
        if self.domain.width <= 0 or self.domain.height <= 0:
            raise ValueError(f"Domain must have a positive size, got {self.domain.width}x{self.domain.height}")
        dynamics = self.dynamics
        if dynamics.boundary_mode not in BOUNDARY_MODES:
            raise ValueError(f"Unknown boundary mode: {dynamics.boundary_mode}")
        if dynamics.boundary_check not in BOUNDARY_CHECKS:
            raise ValueError(f"Unknown boundary check: {dynamics.boundary_check}")
        if not 0.0 <= dynamics.damp <= 1.0:
            raise ValueError(f"damp must be within [0, 1], got {dynamics.damp}")
        if dynamics.personal_space < 0 or dynamics.max_effective_distance < 0:
            raise ValueError("Interaction distances must be non-negative")
        if dynamics.max_speed < 0 or dynamics.max_acceleration < 0 or dynamics.max_force < 0:
            raise ValueError("Speed, acceleration and force limits must be non-negative")
        population = self.population
        if population.min_walkers < 0 or population.min_walkers > population.max_walkers:
            raise ValueError(
                f"Invalid walker range [{population.min_walkers}, {population.max_walkers}]"
            )
        if population.max_path_length < 1:
            raise ValueError(f"max_path_length must be at least 1, got {population.max_path_length}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        return self


def load_config(raw: dict) -> SketchConfig:
    domain = DomainConfig(**raw.get("domain", {}))
    dynamics = DynamicsConfig(**raw.get("dynamics", {}))
    population = PopulationConfig(**raw.get("population", {}))
    strips = StripsConfig(**raw.get("strips", {}))
    capture_raw = dict(raw.get("capture", {}))
    if "root" in capture_raw:
        capture_raw["root"] = Path(capture_raw["root"])
    capture = CaptureConfig(**capture_raw)
    sketch_values = {
        k: v for k, v in raw.items() if k not in {"domain", "dynamics", "population", "strips", "capture"}
    }
    config = SketchConfig(
        domain=domain,
        dynamics=dynamics,
        population=population,
        strips=strips,
        capture=capture,
        **sketch_values,
    )
    return config.validate()
