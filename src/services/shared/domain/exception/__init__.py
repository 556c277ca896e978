from .exceptions import DomainException, DuplicateResourceException

__all__ = ["DomainException", "DuplicateResourceException"]
