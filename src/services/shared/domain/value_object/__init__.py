from .show_time_id import ShowTimeId

__all__ = ["ShowTimeId"]
