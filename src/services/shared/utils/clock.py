from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """現在時刻の取得を抽象化する

    予約日時の生成をテストで固定できるよう、システム時刻は直接読まない。
    """

    def now(self) -> datetime: ...


class SystemClock:
    """UTC のシステム時刻を返す Clock"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
