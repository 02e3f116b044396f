import pytest

from budget.allocation import allocate
from budget.config import Config
from budget.domain import DEFAULT_CATEGORIES
from budget.state import AwaitingInput, InputRejected, ResultReady
from budget.view import ErrorView, PromptView, TableView, build_view_model


def test_prompt_view_for_awaiting_input():
    view = build_view_model(AwaitingInput("12", 1))
    assert view == PromptView(
        prompt="Input income?",
        current_buffer="12",
        hint="Press 'esc' to quit",
        placeholder="Euro amount",
        cursor=1,
    )


def test_error_view_for_rejected_input():
    view = build_view_model(InputRejected())
    assert view == ErrorView(error_message=Config.ERROR_MESSAGE)
    assert view.error_message == "There was an error reading your input"


def test_table_view_for_result():
    view = build_view_model(ResultReady(allocate(1000, DEFAULT_CATEGORIES)))
    assert isinstance(view, TableView)
    assert view.columns == ("Name", "Percentage", "Amount")
    assert view.rows == (
        ("Fixed costs", "50", "500"),
        ("Investments", "25", "250"),
        ("Savings", "10", "100"),
        ("Guilt-free spending", "15", "150"),
    )


def test_build_view_model_is_pure():
    state = ResultReady(allocate(250, DEFAULT_CATEGORIES))
    assert build_view_model(state) == build_view_model(state)


def test_unknown_state():
    with pytest.raises(TypeError):
        build_view_model("done")
