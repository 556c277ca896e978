from dataclasses import dataclass


@dataclass(frozen=True)
class ShowTimeId:
    """上映回ID（booking / screening 共通）

    Value Object として不変性を保証。
    同じ値を持つ ShowTimeId は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("ShowTimeId cannot be blank")

    def __str__(self) -> str:
        return self.value
