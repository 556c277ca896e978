from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値へのアクセスは必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    """
