from typing import Sequence, Tuple

from budget.domain import AllocationResult, Category


def share_of(income: int, percentage: int) -> int:
    """Return ``percentage`` percent of ``income``, truncated toward zero."""
    product = income * percentage
    if product < 0:
        return -(-product // 100)
    return product // 100


def allocate(income: int, categories: Sequence[Category]) -> Tuple[AllocationResult, ...]:
    return tuple(
        AllocationResult(category=c, amount=share_of(income, c.percentage))
        for c in categories
    )
