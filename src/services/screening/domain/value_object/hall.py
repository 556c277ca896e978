import string
from dataclasses import dataclass

MAX_SEATS_PER_ROW = 50


@dataclass(frozen=True)
class Hall:
    """上映ホール

    seat_rows は (列, 座席数) の組を配置順に並べたもの。
    例: (("A", 10), ("B", 10), ("C", 8)) は A1-A10, B1-B10, C1-C8 の28席。
    """

    id: str
    name: str
    seat_rows: tuple[tuple[str, int], ...] = ()

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Hall id cannot be blank")
        if not self.name or not self.name.strip():
            raise ValueError("Hall name cannot be blank")

        rows = [row for row, _ in self.seat_rows]
        if len(set(rows)) != len(rows):
            raise ValueError("Hall rows must be unique")
        for row, count in self.seat_rows:
            if len(row) != 1 or row not in string.ascii_uppercase:
                raise ValueError(f"Invalid hall row: {row}")
            if not 1 <= count <= MAX_SEATS_PER_ROW:
                raise ValueError(
                    f"Row {row} must have between 1 and {MAX_SEATS_PER_ROW} seats"
                )

    @property
    def capacity(self) -> int:
        return sum(count for _, count in self.seat_rows)

    def seat_labels(self) -> list[str]:
        """座席ラベルを配置順に返す"""
        return [
            f"{row}{number}"
            for row, count in self.seat_rows
            for number in range(1, count + 1)
        ]
