from datetime import datetime
from enum import Enum


class DayOfWeek(str, Enum):
    """曜日"""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, dt: datetime) -> "DayOfWeek":
        """datetime の曜日を返す（datetime のタイムゾーンで判定）"""
        return list(cls)[dt.weekday()]
