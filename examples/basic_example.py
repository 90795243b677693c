"""
Basic example of using the car simulator.
"""

from car_simulator import (
    ActionCode,
    SimulationAnalyzer,
    SimulationConfig,
    SimulationLogicService,
    Status,
)


def main():
    print("=" * 80)
    print("Car Simulator - Basic Example")
    print("=" * 80)

    config = SimulationConfig(seed=42)
    service = SimulationLogicService(config=config)
    analyzer = SimulationAnalyzer(config)

    status = Status(gas_value=10, energy_value=30)
    print(f"\nStarting from {status}")

    trip = [
        ActionCode.DRIVE_FORWARD,
        ActionCode.TURN_RIGHT,
        ActionCode.DRIVE_FORWARD,
        ActionCode.REFUEL,
        ActionCode.TURN_LEFT,
        ActionCode.REST,
        ActionCode.REVERSE,
        ActionCode.DRIVE_FORWARD,
    ]
    print(f"Driving {len(trip)} actions...\n")
    service.run(trip, status, analyzer=analyzer)

    analyzer.print_summary()


if __name__ == "__main__":
    main()
