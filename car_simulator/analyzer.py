"""
Analyzer for recording and summarizing a sequence of simulation steps.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json

from loguru import logger

from .config import DEFAULT_CONFIG, SimulationConfig
from .models import ActionCode, Status


@dataclass
class SimulationStep:
    """One processed action with the status before and after it."""
    index: int
    action_code: int
    before: Status
    after: Status

    @property
    def action_name(self) -> str:
        return ActionCode.describe(self.action_code)

    @property
    def gas_delta(self) -> int:
        return self.after.gas_value - self.before.gas_value

    @property
    def energy_delta(self) -> int:
        return self.after.energy_value - self.before.energy_value

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the step."""
        return {
            "index": self.index,
            "action_code": int(self.action_code),
            "action": self.action_name,
            "direction": self.after.cardinal_direction.name,
            "movement": self.after.movement_action.name,
            "gas_before": self.before.gas_value,
            "gas_after": self.after.gas_value,
            "gas_delta": self.gas_delta,
            "energy_before": self.before.energy_value,
            "energy_after": self.after.energy_value,
            "energy_delta": self.energy_delta,
        }

    def __repr__(self) -> str:
        return f"SimulationStep({self.index}, {self.action_name}, {self.before} -> {self.after})"


class SimulationAnalyzer:
    """Records simulation steps and reports on fuel and energy use."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the analyzer.

        Args:
            config: Supplies the low gas and low energy thresholds
        """
        self.config = config or DEFAULT_CONFIG
        self.steps: List[SimulationStep] = []

    def add_step(self, action_code: int, before: Status, after: Status) -> SimulationStep:
        """Record a step and log any resource alerts for the new status."""
        step = SimulationStep(index=len(self.steps), action_code=action_code, before=before, after=after)
        self.steps.append(step)
        for alert in self.alerts(after):
            logger.warning(f"Step {step.index} ({step.action_name}): {alert}")
        return step

    def clear_steps(self):
        """Clear all recorded steps."""
        self.steps = []

    def alerts(self, status: Status) -> List[str]:
        """
        Describe resource levels that need attention.

        Args:
            status: Status to inspect

        Returns:
            List of notices, empty when gas and energy are comfortable
        """
        notices = []
        if status.gas_value <= 0:
            notices.append("out of gas, refuel needed")
        elif status.gas_value <= self.config.low_gas_threshold:
            notices.append(f"low gas ({status.gas_value}/{self.config.max_gas})")

        if status.energy_value <= 0:
            notices.append("driver exhausted")
        elif status.energy_value <= self.config.low_energy_threshold:
            notices.append(f"low energy ({status.energy_value})")
        return notices

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistical summary of the recorded steps.

        Returns:
            Dictionary with step counts and resource usage
        """
        if not self.steps:
            return {}

        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_name] = action_counts.get(step.action_name, 0) + 1

        # Refuels add gas, so only negative deltas count as consumption
        gas_consumed = sum(-step.gas_delta for step in self.steps if step.gas_delta < 0)
        energy_consumed = sum(-step.energy_delta for step in self.steps if step.energy_delta < 0)

        return {
            "num_steps": len(self.steps),
            "actions": action_counts,
            "refuels": action_counts.get(ActionCode.REFUEL.name, 0),
            "gas_consumed": gas_consumed,
            "energy_consumed": energy_consumed,
            "average_gas_per_step": gas_consumed / len(self.steps),
            "average_energy_per_step": energy_consumed / len(self.steps),
            "final_status": self.steps[-1].after.to_dict(),
        }

    def print_summary(self):
        """Print a formatted report of the recorded steps."""
        if not self.steps:
            print("No steps to summarize.")
            return

        print("=" * 80)
        print("CAR SIMULATION SUMMARY")
        print("=" * 80)

        for step in self.steps:
            print(f"  {step.index:>3}  {step.action_name:<14} "
                  f"{step.after.cardinal_direction.name:<6} {step.after.movement_action.name:<9} "
                  f"gas {step.before.gas_value:>2} -> {step.after.gas_value:>2}   "
                  f"energy {step.before.energy_value:>3} -> {step.after.energy_value:>3}")

        stats = self.get_statistics()
        print("\n" + "-" * 80)
        print(f"  Steps:            {stats['num_steps']}")
        print(f"  Refuels:          {stats['refuels']}")
        print(f"  Gas Consumed:     {stats['gas_consumed']}")
        print(f"  Energy Consumed:  {stats['energy_consumed']}")
        final = self.steps[-1].after
        print(f"  Final Status:     {final}")
        for alert in self.alerts(final):
            print(f"  Alert:            {alert}")
        print("=" * 80)

    def export_to_json(self, filepath: str):
        """
        Export the recorded steps to a JSON file.

        Args:
            filepath: Path to output JSON file
        """
        data = {
            "statistics": self.get_statistics(),
            "steps": [step.get_summary() for step in self.steps]
        }

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)
