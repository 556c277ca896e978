from .hall import Hall

__all__ = ["Hall"]
