from .show_time_repository import ShowTimeRepository

__all__ = ["ShowTimeRepository"]
