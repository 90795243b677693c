"""Configuration for the car simulator.

``SimulationConfig`` gathers the constants of the resource rules in one
frozen object. The defaults reproduce the stable behaviour of the action
table: refuelling fills the tank to 20 and every decay draw lies in 1..5.

Example:
    >>> from car_simulator.config import SimulationConfig
    >>> config = SimulationConfig(seed=42)
    >>> config.max_gas
    20
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import MAX_GAS


@dataclass(frozen=True)
class SimulationConfig:
    """Constants of the resource rules.

    Attributes:
        max_gas: Gas level set by a refuel; statuses produced under this config
            keep gas within ``0..max_gas``.
        min_decay: Smallest amount a decay draw can remove.
        max_decay: Largest amount a decay draw can remove.
        low_gas_threshold: Gas level at or below which the analyzer raises a notice.
        low_energy_threshold: Energy level at or below which the analyzer raises a notice.
        seed: Seed for the service's own random source; None for fresh entropy.
    """

    max_gas: int = MAX_GAS
    min_decay: int = 1
    max_decay: int = 5
    low_gas_threshold: int = 5
    low_energy_threshold: int = 5
    seed: int | None = None

    def __post_init__(self):
        """Validate the configured values.

        Raises:
            ValueError: If any value is outside its valid range.
        """
        if self.max_gas <= 0:
            msg = f"max_gas must be positive, got {self.max_gas}"
            raise ValueError(msg)
        if self.min_decay < 1:
            msg = f"min_decay must be at least 1 so every step costs energy, got {self.min_decay}"
            raise ValueError(msg)
        if self.min_decay > self.max_decay:
            msg = f"min_decay ({self.min_decay}) exceeds max_decay ({self.max_decay})"
            raise ValueError(msg)
        if self.low_gas_threshold < 0 or self.low_energy_threshold < 0:
            msg = "Alert thresholds cannot be negative"
            raise ValueError(msg)


DEFAULT_CONFIG = SimulationConfig()
