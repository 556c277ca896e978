from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """顧客ID（Value Object）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("CustomerId cannot be blank")

    def __str__(self) -> str:
        return self.value
