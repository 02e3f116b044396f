from dataclasses import dataclass
from typing import Tuple, Union

from budget.config import Config
from budget.state import AwaitingInput, InputRejected, ResultReady, SessionState

COLUMNS: Tuple[str, ...] = ("Name", "Percentage", "Amount")


@dataclass(frozen=True)
class PromptView:
    prompt: str
    current_buffer: str
    hint: str
    placeholder: str = ""
    cursor: int = 0


@dataclass(frozen=True)
class ErrorView:
    error_message: str


@dataclass(frozen=True)
class TableView:
    columns: Tuple[str, ...]
    rows: Tuple[Tuple[str, str, str], ...]


RenderModel = Union[PromptView, ErrorView, TableView]


def build_view_model(state: SessionState) -> RenderModel:
    """Describe what to display for ``state``, independent of any renderer."""
    if isinstance(state, AwaitingInput):
        return PromptView(
            prompt=Config.PROMPT,
            current_buffer=state.buffer,
            hint=Config.HINT,
            placeholder=Config.PLACEHOLDER,
            cursor=state.cursor,
        )
    if isinstance(state, InputRejected):
        return ErrorView(error_message=Config.ERROR_MESSAGE)
    if isinstance(state, ResultReady):
        rows = tuple(
            (r.category.name, str(r.category.percentage), str(r.amount))
            for r in state.results
        )
        return TableView(columns=COLUMNS, rows=rows)
    raise TypeError(f"unknown session state: {state!r}")
