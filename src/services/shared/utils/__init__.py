from .clock import Clock, SystemClock
from .http_response import api_response
from .logger import get_logger

__all__ = ["Clock", "SystemClock", "api_response", "get_logger"]
