from abc import ABC, abstractmethod

from services.booking.domain.value_object import Seat, ShowTimeReference
from services.shared.domain import ShowTimeId


class ShowTimeRepository(ABC):
    """予約コンテキストから上映回を参照するためのインターフェース

    上映回の正本は screening 側にあり、ここでは読み取りのみ行う。
    """

    @abstractmethod
    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTimeReference | None:
        """上映回を検索する。存在しなければ None"""
        raise NotImplementedError

    @abstractmethod
    def get_all_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        """上映回のホールの全座席を配置順で返す。未設定なら空リスト"""
        raise NotImplementedError
