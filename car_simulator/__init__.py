"""
Car Simulator
Turn-by-turn state evolution of a simulated car: heading, fuel and driver energy.
"""

from loguru import logger

from .models import ActionCode, CardinalDirection, MovementAction, Status, MAX_GAS
from .strategies import (
    DirectionStrategy,
    TurnLeftStrategy,
    TurnRightStrategy,
    DriveForwardStrategy,
    ReverseStrategy,
    DummyDirectionStrategy
)
from .context import DirectionContext
from .resolver import DirectionStrategyResolver, classify_action, resolve_strategy
from .randomness import DecaySource, RandomDecaySource, FixedDecaySource
from .config import SimulationConfig, DEFAULT_CONFIG
from .service import SimulationLogicService
from .analyzer import SimulationAnalyzer, SimulationStep

logger.disable("car_simulator")

__version__ = "0.1.0"

__all__ = [
    "ActionCode",
    "CardinalDirection",
    "MovementAction",
    "Status",
    "MAX_GAS",
    "DirectionStrategy",
    "TurnLeftStrategy",
    "TurnRightStrategy",
    "DriveForwardStrategy",
    "ReverseStrategy",
    "DummyDirectionStrategy",
    "DirectionContext",
    "DirectionStrategyResolver",
    "classify_action",
    "resolve_strategy",
    "DecaySource",
    "RandomDecaySource",
    "FixedDecaySource",
    "SimulationConfig",
    "DEFAULT_CONFIG",
    "SimulationLogicService",
    "SimulationAnalyzer",
    "SimulationStep",
]
