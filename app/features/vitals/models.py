# Vitals Feature - Models

from enum import Enum
from beanie import Document, Indexed
from app.shared.models import TimestampMixin


class VitalType(str, Enum):
    """Kinds of manually tracked vitals."""
    BP = "BP"
    SUGAR = "Sugar"
    WEIGHT = "Weight"
    HEART_RATE = "Heart Rate"


class VitalEntry(Document, TimestampMixin):
    """A single manual vitals reading, e.g. BP 120/80 on a given day."""

    user_id: Indexed(str)
    vital_type: str
    value: str  # Free text with unit, e.g. "95 mg/dL"
    entry_date: str  # YYYY-MM-DD
    status: str = "Normal"

    class Settings:
        name = "vitals"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("entry_date", -1)],
        ]
