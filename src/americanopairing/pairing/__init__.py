from americanopairing.pairing.americano import (
    calculate_total_rounds,
    generate_schedule,
    is_valid_roster_size,
)

__all__ = ["calculate_total_rounds", "generate_schedule", "is_valid_roster_size"]
