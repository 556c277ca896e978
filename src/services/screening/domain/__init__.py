from .entity import ShowTime
from .enum import DayOfWeek
from .repository import ShowTimeRepository
from .value_object import Hall

__all__ = [
    "ShowTime",
    "DayOfWeek",
    "Hall",
    "ShowTimeRepository",
]
