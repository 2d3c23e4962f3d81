from __future__ import annotations

from enum import Enum


class ScheduleStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"  # derived at read time, never stored
    SKIPPED = "skipped"

    @property
    def is_terminal(self) -> bool:
        return self in {ScheduleStatus.COMPLETED, ScheduleStatus.SKIPPED}


# Stored status -> statuses it may be moved to by the owner.
# Re-applying a terminal state is accepted and rewrites the row.
ALLOWED_TRANSITIONS: dict[ScheduleStatus, set[ScheduleStatus]] = {
    ScheduleStatus.PENDING: {ScheduleStatus.COMPLETED, ScheduleStatus.SKIPPED},
    ScheduleStatus.COMPLETED: {ScheduleStatus.COMPLETED},
    ScheduleStatus.SKIPPED: {ScheduleStatus.SKIPPED},
}


def can_transition(current: ScheduleStatus, target: ScheduleStatus) -> bool:
    # overdue is only ever a view of a stored pending row
    if current is ScheduleStatus.OVERDUE:
        current = ScheduleStatus.PENDING
    return target in ALLOWED_TRANSITIONS.get(current, set())
