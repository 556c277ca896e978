from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .repository import Repository as Repository
from .value_object import (
    ShowTimeId as ShowTimeId,
)
