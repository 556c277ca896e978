from .day_of_week import DayOfWeek

__all__ = ["DayOfWeek"]
