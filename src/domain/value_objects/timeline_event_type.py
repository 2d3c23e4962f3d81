from __future__ import annotations

from enum import Enum


class TimelineEventType(str, Enum):
    VACCINATION = "vaccination"
    VET_VISIT = "vet_visit"
    SYMPTOM = "symptom"
    NOTE = "note"
    WEIGHT_UPDATE = "weight_update"
    MEDICATION = "medication"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()
