from dataclasses import dataclass
from typing import Tuple, Union

from budget.domain import AllocationResult


@dataclass(frozen=True)
class AwaitingInput:
    buffer: str = ""
    cursor: int = 0


@dataclass(frozen=True)
class InputRejected:
    pass


@dataclass(frozen=True)
class ResultReady:
    results: Tuple[AllocationResult, ...]


SessionState = Union[AwaitingInput, InputRejected, ResultReady]
