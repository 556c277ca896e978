from abc import abstractmethod

from services.screening.domain.entity import ShowTime
from services.screening.domain.enum import DayOfWeek
from services.shared.domain import Repository, ShowTimeId


class ShowTimeRepository(Repository[ShowTime, ShowTimeId]):
    """上映回リポジトリのインターフェース"""

    @abstractmethod
    def save(self, show_time: ShowTime) -> ShowTime:
        """上映回を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTime | None:
        """上映回IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_day_of_week(self, day_of_week: DayOfWeek) -> list[ShowTime]:
        """曜日で検索する（開始日時の昇順）"""
        raise NotImplementedError
