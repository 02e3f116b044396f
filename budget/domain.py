from dataclasses import dataclass
from typing import Final, Tuple


@dataclass(frozen=True)
class Category:
    name: str
    percentage: int  # share of income, 0..100

    def __post_init__(self) -> None:
        if not 0 <= self.percentage <= 100:
            raise ValueError(f"percentage must be within 0..100, got {self.percentage}")


@dataclass(frozen=True)
class AllocationResult:
    category: Category
    amount: int  # truncated, never rounded


# Percentages are not required to sum to 100.
DEFAULT_CATEGORIES: Final[Tuple[Category, ...]] = (
    Category("Fixed costs", 50),
    Category("Investments", 25),
    Category("Savings", 10),
    Category("Guilt-free spending", 15),
)
