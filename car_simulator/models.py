"""
Core data models for the car simulator.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any, Dict

MAX_GAS = 20
"""Fuel tank capacity; refuelling resets gas to this value."""


class CardinalDirection(Enum):
    """Compass heading of the car.

    Members are declared in clockwise order, so turning is index arithmetic
    modulo four over the member list.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate(self, steps: int) -> "CardinalDirection":
        """Return the heading ``steps`` quarter turns clockwise (negative is counter-clockwise)."""
        members = list(CardinalDirection)
        return members[(members.index(self) + steps) % len(members)]

    def opposite(self) -> "CardinalDirection":
        """Return the opposite point on the compass."""
        return self.rotate(2)


class MovementAction(Enum):
    """Classification of a requested action.

    A status only ever stores NONE, LEFT, RIGHT, FORWARD or BACKWARD; REST and
    REFUEL are dispatcher classifications that no direction strategy writes.
    """

    NONE = 0
    LEFT = 1
    RIGHT = 2
    FORWARD = 3
    BACKWARD = 4
    REST = 5
    REFUEL = 6


class ActionCode(IntEnum):
    """Stable external action-code table."""

    TURN_LEFT = 1
    TURN_RIGHT = 2
    DRIVE_FORWARD = 3
    REVERSE = 4
    REST = 5
    REFUEL = 6

    @classmethod
    def describe(cls, code: int) -> str:
        """Return the member name for ``code`` or ``"UNRECOGNIZED"``."""
        try:
            return cls(code).name
        except ValueError:
            return "UNRECOGNIZED"


@dataclass(frozen=True)
class Status:
    """Snapshot of the car between two actions.

    Attributes:
        cardinal_direction: Current heading.
        movement_action: Last movement executed by a direction strategy.
        gas_value: Fuel level, kept within ``0..max_gas`` of the service config
            (``MAX_GAS`` by default).
        energy_value: Driver energy, never negative.
    """

    cardinal_direction: CardinalDirection = CardinalDirection.NORTH
    movement_action: MovementAction = MovementAction.NONE
    gas_value: int = 0
    energy_value: int = 0

    def evolve(self, **changes: Any) -> "Status":
        """Return a copy of this status with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "cardinal_direction": self.cardinal_direction.name,
            "movement_action": self.movement_action.name,
            "gas_value": self.gas_value,
            "energy_value": self.energy_value,
        }

    def __repr__(self) -> str:
        return (f"Status({self.cardinal_direction.name}, {self.movement_action.name}, "
                f"gas={self.gas_value}, energy={self.energy_value})")
