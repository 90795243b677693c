"""Direction context holding the active direction strategy.

The simulation service installs a strategy into the context and then runs it,
so the service never needs to know how a concrete strategy rotates the car.
"""

from __future__ import annotations

from .models import Status
from .strategies import DirectionStrategy


class DirectionContext:
    """Single-slot holder for the active direction strategy.

    Attributes:
        _strategy: The installed strategy, or None until one is set.
    """

    _strategy: DirectionStrategy | None

    def __init__(self, strategy: DirectionStrategy | None = None):
        """Initialize the context, optionally with a strategy already installed.

        Args:
            strategy: Strategy to install, or None to start empty.
        """
        self._strategy = strategy

    @property
    def strategy(self) -> DirectionStrategy | None:
        """Get the installed strategy, or None if none has been set."""
        return self._strategy

    def set_strategy(self, strategy: DirectionStrategy) -> None:
        """Install ``strategy``, replacing any previously installed one."""
        self._strategy = strategy

    def execute_strategy(self, status: Status) -> Status:
        """Run the installed strategy against ``status``.

        Args:
            status: The status to transform.

        Returns:
            The strategy's result, or ``status`` unchanged when no strategy
            has been installed.
        """
        if self._strategy is None:
            return status
        return self._strategy.execute(status)
