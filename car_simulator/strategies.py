"""
Direction strategies that turn, drive or reverse the car.
"""

from abc import ABC, abstractmethod
from .models import MovementAction, Status


class DirectionStrategy(ABC):
    """Base class for direction strategies.

    A strategy only rewrites the heading and the last movement of a status;
    gas and energy are left to the simulation service.
    """

    @abstractmethod
    def execute(self, status: Status) -> Status:
        """
        Apply the movement to a status.

        Args:
            status: The status before the movement

        Returns:
            A new Status with heading and movement updated
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of the strategy."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TurnLeftStrategy(DirectionStrategy):
    """Rotates the car one quarter turn counter-clockwise."""

    def get_name(self) -> str:
        return "Turn Left"

    def execute(self, status: Status) -> Status:
        return status.evolve(
            cardinal_direction=status.cardinal_direction.rotate(-1),
            movement_action=MovementAction.LEFT
        )


class TurnRightStrategy(DirectionStrategy):
    """Rotates the car one quarter turn clockwise."""

    def get_name(self) -> str:
        return "Turn Right"

    def execute(self, status: Status) -> Status:
        return status.evolve(
            cardinal_direction=status.cardinal_direction.rotate(1),
            movement_action=MovementAction.RIGHT
        )


class DriveForwardStrategy(DirectionStrategy):
    """Keeps the heading and records a forward movement."""

    def get_name(self) -> str:
        return "Drive Forward"

    def execute(self, status: Status) -> Status:
        return status.evolve(movement_action=MovementAction.FORWARD)


class ReverseStrategy(DirectionStrategy):
    """Flips the heading to the opposite point on the compass."""

    def get_name(self) -> str:
        return "Reverse"

    def execute(self, status: Status) -> Status:
        return status.evolve(
            cardinal_direction=status.cardinal_direction.opposite(),
            movement_action=MovementAction.BACKWARD
        )


class DummyDirectionStrategy(DirectionStrategy):
    """No-op fallback used for actions that do not move the car."""

    def get_name(self) -> str:
        return "No Movement"

    def execute(self, status: Status) -> Status:
        return status
