from __future__ import annotations

import re
from dataclasses import dataclass

ROW_PATTERN = re.compile(r"^[A-Z]$")
DISPLAY_PATTERN = re.compile(r"^([A-Z])(\d{1,2})$")
MIN_SEAT_NUMBER = 1
MAX_SEAT_NUMBER = 50


@dataclass(frozen=True)
class Seat:
    """座席（Value Object）

    列（A-Z の1文字）と番号（1-50）の組で座席を表す。
    料金やセクションは持たず、座席の識別だけを担う。
    """

    row: str
    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.row, str) or not ROW_PATTERN.match(self.row):
            raise ValueError(
                f"Row must be a single uppercase letter (A-Z), got: {self.row}"
            )
        if (
            isinstance(self.number, bool)
            or not isinstance(self.number, int)
            or not MIN_SEAT_NUMBER <= self.number <= MAX_SEAT_NUMBER
        ):
            raise ValueError(
                f"Seat number must be between {MIN_SEAT_NUMBER} and "
                f"{MAX_SEAT_NUMBER}, got: {self.number}"
            )

    def display_name(self) -> str:
        """「B4」のような表示用の文字列を返す"""
        return f"{self.row}{self.number}"

    def __str__(self) -> str:
        return self.display_name()

    @classmethod
    def from_display(cls, label: str) -> Seat:
        """表示用の文字列（例: "B4"）から Seat を生成する"""
        match = DISPLAY_PATTERN.match(label)
        if match is None:
            raise ValueError(f"Invalid seat label: {label}")
        return cls(row=match.group(1), number=int(match.group(2)))
