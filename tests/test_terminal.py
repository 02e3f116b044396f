import pytest
from textual import events

from app.terminal import BudgetApp, IncomeField, run_terminal_session
from budget.errors import RuntimeStartupFailure
from budget.view import ErrorView, PromptView, TableView


@pytest.mark.asyncio
async def test_typed_income_exits_with_table():
    app = BudgetApp()
    async with app.run_test() as pilot:
        await pilot.press("1", "0", "0", "0", "enter")
    assert isinstance(app.return_value, TableView)
    assert app.return_value.rows[0] == ("Fixed costs", "50", "500")


@pytest.mark.asyncio
async def test_invalid_income_exits_with_error():
    app = BudgetApp()
    async with app.run_test() as pilot:
        await pilot.press("a", "b", "c", "enter")
    assert isinstance(app.return_value, ErrorView)


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["escape", "ctrl+c"])
async def test_cancel_keys_exit_without_result(key):
    app = BudgetApp()
    async with app.run_test() as pilot:
        await pilot.press("5", key)
    assert app.return_value is None
    assert app.session.cancelled


@pytest.mark.asyncio
async def test_field_follows_buffer_and_char_limit():
    app = BudgetApp()
    async with app.run_test() as pilot:
        await pilot.press("1", "2", "3", "4", "5", "6", "backspace")
        view = app.query_one(IncomeField).prompt_view
        assert isinstance(view, PromptView)
        assert view.current_buffer == "1234"
        await pilot.press("escape")


@pytest.mark.asyncio
async def test_paste_fills_field_up_to_char_limit():
    app = BudgetApp()
    async with app.run_test() as pilot:
        app.query_one(IncomeField).post_message(events.Paste("1234567"))
        await pilot.pause()
        assert app.query_one(IncomeField).prompt_view.current_buffer == "12345"
        await pilot.press("enter")
    assert app.return_value.rows[0] == ("Fixed costs", "50", "6172")


@pytest.mark.asyncio
async def test_pasted_key_names_are_plain_text():
    app = BudgetApp()
    async with app.run_test() as pilot:
        app.query_one(IncomeField).post_message(events.Paste("enter"))
        await pilot.pause()
        assert not app.session.finished
        assert app.query_one(IncomeField).prompt_view.current_buffer == "enter"
        await pilot.press("escape")


def test_run_failure_is_reported_as_startup_failure():
    class BrokenApp(BudgetApp):
        def run(self, *args, **kwargs):
            raise OSError("not a terminal")

    with pytest.raises(RuntimeStartupFailure, match="not a terminal"):
        run_terminal_session(BrokenApp())


def test_non_zero_return_code_is_reported_as_startup_failure():
    class FailingApp(BudgetApp):
        def on_mount(self) -> None:
            super().on_mount()
            self.exit(return_code=2)

    with pytest.raises(RuntimeStartupFailure, match="code 2"):
        run_terminal_session(FailingApp(), headless=True)
