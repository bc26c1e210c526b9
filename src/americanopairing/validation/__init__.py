from americanopairing.validation.schedule_checker import (
    CheckResult,
    CheckStatus,
    ScheduleChecker,
    ValidationReport,
    ViolationType,
    create_schedule_checker,
)

__all__ = [
    "CheckResult",
    "CheckStatus",
    "ScheduleChecker",
    "ValidationReport",
    "ViolationType",
    "create_schedule_checker",
]
