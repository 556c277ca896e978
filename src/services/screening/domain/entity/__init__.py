from .show_time import ShowTime

__all__ = ["ShowTime"]
