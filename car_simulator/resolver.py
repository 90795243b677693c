"""Mapping from action codes to movements and from movements to strategies."""

from __future__ import annotations

from collections.abc import Callable

from .models import MovementAction
from .strategies import (
    DirectionStrategy,
    DriveForwardStrategy,
    DummyDirectionStrategy,
    ReverseStrategy,
    TurnLeftStrategy,
    TurnRightStrategy,
)

DirectionStrategyResolver = Callable[[MovementAction], DirectionStrategy]
"""Type alias for functions that pick the strategy for a movement."""

_ACTION_CODES: dict[int, MovementAction] = {
    1: MovementAction.LEFT,
    2: MovementAction.RIGHT,
    3: MovementAction.FORWARD,
    4: MovementAction.BACKWARD,
    5: MovementAction.REST,
    6: MovementAction.REFUEL,
}

# Strategies carry no state, so one instance of each is shared.
_STRATEGIES: dict[MovementAction, DirectionStrategy] = {
    MovementAction.LEFT: TurnLeftStrategy(),
    MovementAction.RIGHT: TurnRightStrategy(),
    MovementAction.FORWARD: DriveForwardStrategy(),
    MovementAction.BACKWARD: ReverseStrategy(),
}
_NO_MOVEMENT = DummyDirectionStrategy()


def classify_action(action_code: int) -> MovementAction:
    """Classify an integer action code.

    Args:
        action_code: Any integer; ``ActionCode`` members are accepted.

    Returns:
        The matching MovementAction, or ``MovementAction.NONE`` for codes
        outside the action table.
    """
    return _ACTION_CODES.get(int(action_code), MovementAction.NONE)


def resolve_strategy(movement_action: MovementAction) -> DirectionStrategy:
    """Return the direction strategy for ``movement_action``.

    Movements without a direction change (NONE, REST, REFUEL) resolve to the
    no-op strategy, so resolution never fails.
    """
    return _STRATEGIES.get(movement_action, _NO_MOVEMENT)
