"""Simulation logic service that advances the car one action at a time.

Each call to ``perform_action`` is one transition ``Status x action -> Status``:
the action code is classified, refuelling short-circuits, every other action
runs its direction strategy through a ``DirectionContext`` and then pays the
gas and energy decay. The service keeps no status between calls.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from contextlib import nullcontext
from typing import TYPE_CHECKING

from loguru import logger

from .config import DEFAULT_CONFIG, SimulationConfig
from .context import DirectionContext
from .models import ActionCode, MovementAction, Status
from .randomness import DecaySource, RandomDecaySource
from .resolver import DirectionStrategyResolver, classify_action, resolve_strategy

if TYPE_CHECKING:
    from .analyzer import SimulationAnalyzer


class SimulationLogicService:
    """Applies action codes to car statuses.

    Attributes:
        resolver: Picks the direction strategy for a classified action.
        decay_source: Source of the random decay amounts.
        config: Resource rule constants.
    """

    def __init__(
        self,
        context: DirectionContext | None = None,
        resolver: DirectionStrategyResolver = resolve_strategy,
        decay_source: DecaySource | None = None,
        config: SimulationConfig | None = None,
    ):
        """Initialize the service.

        Args:
            context: Shared direction context. When omitted, every call gets a
                fresh context; when given, calls are serialized through a lock
                because the context has a single mutable strategy slot.
            resolver: Function mapping a MovementAction to a strategy.
            decay_source: Randomness for decay draws. Defaults to a
                ``RandomDecaySource`` seeded from ``config.seed``.
            config: Resource rule constants, ``DEFAULT_CONFIG`` when omitted.
        """
        self.config = config or DEFAULT_CONFIG
        self.resolver = resolver
        self.decay_source = decay_source or RandomDecaySource(self.config.seed)
        self._context = context
        self._lock = threading.Lock() if context is not None else None

    def perform_action(self, action_code: int, status: Status) -> Status:
        """Process one action and return the next status.

        Args:
            action_code: Integer code from the action table; unknown codes
                leave the heading alone but still cost gas and energy.
            status: The current status.

        Returns:
            The updated status. Never raises for any integer code.
        """
        movement = classify_action(action_code)

        if movement is MovementAction.REFUEL:
            result = status.evolve(gas_value=self.config.max_gas)
            logger.debug(f"Refuelled: {status} -> {result}")
            return result

        if movement is MovementAction.NONE:
            logger.debug(f"Unrecognized action code {action_code}, heading unchanged")

        strategy = self.resolver(movement)
        with self._lock if self._lock is not None else nullcontext():
            context = self._context if self._context is not None else DirectionContext()
            context.set_strategy(strategy)
            moved = context.execute_strategy(status)

        result = self.decrease_status_values(action_code, moved)
        logger.debug(f"{ActionCode.describe(action_code)} via {strategy.get_name()}: {status} -> {result}")
        return result

    def decrease_status_values(self, action_code: int, status: Status) -> Status:
        """Apply the per-step energy and gas decay.

        Energy always loses one draw. Gas loses a second draw unless the
        action is a rest. Both resources are floored at zero. Draws are taken
        energy first, then gas.

        Args:
            action_code: The action being paid for.
            status: Status after the direction change.

        Returns:
            A new Status with decayed resources.
        """
        energy = max(status.energy_value - self._draw(), 0)

        gas = status.gas_value
        if classify_action(action_code) is not MovementAction.REST:
            gas = max(gas - self._draw(), 0)

        return status.evolve(gas_value=gas, energy_value=energy)

    def run(
        self,
        action_codes: Iterable[int],
        status: Status,
        analyzer: SimulationAnalyzer | None = None,
    ) -> list[Status]:
        """Apply a sequence of actions, chaining each result into the next call.

        Args:
            action_codes: Codes to apply in order.
            status: Starting status.
            analyzer: Optional analyzer that records every step.

        Returns:
            The status after each action, in order.
        """
        statuses = []
        for code in action_codes:
            next_status = self.perform_action(code, status)
            if analyzer is not None:
                analyzer.add_step(code, status, next_status)
            statuses.append(next_status)
            status = next_status
        return statuses

    def _draw(self) -> int:
        return self.decay_source.draw(self.config.min_decay, self.config.max_decay)
