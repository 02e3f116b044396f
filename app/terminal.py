"""Terminal front end: a Textual app driving one budget session."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import RenderableType
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from app.render import DEFAULT_STYLE, TableStyle, render_prompt
from budget.errors import RuntimeStartupFailure
from budget.events import CTRL_C, ESCAPE, PASTE, KeyEvent
from budget.session import SessionController
from budget.view import PromptView, RenderModel

logger = logging.getLogger(__name__)

BLINK_INTERVAL = 0.5


class IncomeField(Widget, can_focus=True):
    """Prompt, editable income and hint. Keystrokes are posted to the app untouched."""

    DEFAULT_CSS = """
    IncomeField {
        height: auto;
        padding: 1 1;
    }
    """

    prompt_view: reactive[Optional[PromptView]] = reactive(None, layout=True)
    cursor_visible: reactive[bool] = reactive(True)

    class Keystroke(Message):
        def __init__(self, key_event: KeyEvent) -> None:
            super().__init__()
            self.key_event = key_event

    def __init__(self, table_style: TableStyle = DEFAULT_STYLE, **kwargs) -> None:
        super().__init__(**kwargs)
        self.table_style = table_style

    def on_mount(self) -> None:
        self.set_interval(BLINK_INTERVAL, self._blink)

    def _blink(self) -> None:
        self.cursor_visible = not self.cursor_visible

    def render(self) -> RenderableType:
        if self.prompt_view is None:
            return ""
        return render_prompt(self.prompt_view, self.table_style, self.cursor_visible)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        char = event.character if event.is_printable and event.character else ""
        self.cursor_visible = True
        self.post_message(self.Keystroke(KeyEvent(event.key, char)))

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        lines = event.text.splitlines()
        if not lines:
            return
        self.cursor_visible = True
        self.post_message(self.Keystroke(KeyEvent(PASTE, lines[0])))


class BudgetApp(App[Optional[RenderModel]]):
    """Collects one income value; exits with the final view, or None when cancelled."""

    TITLE = "Budget Split"

    BINDINGS = [
        Binding("escape", f"cancel('{ESCAPE}')", "Quit", priority=True),
        Binding("ctrl+c", f"cancel('{CTRL_C}')", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: Optional[SessionController] = None,
                 table_style: TableStyle = DEFAULT_STYLE) -> None:
        super().__init__()
        self.session = session or SessionController()
        self.table_style = table_style

    def compose(self) -> ComposeResult:
        yield IncomeField(self.table_style, id="income")

    def on_mount(self) -> None:
        field = self.query_one(IncomeField)
        field.prompt_view = self.session.view()
        field.focus()

    def on_income_field_keystroke(self, message: IncomeField.Keystroke) -> None:
        self._forward(message.key_event)

    def action_cancel(self, key: str = ESCAPE) -> None:
        self._forward(KeyEvent(key))

    def _forward(self, event: KeyEvent) -> None:
        self.session.handle(event)
        if self.session.finished:
            self.exit(None if self.session.cancelled else self.session.view())
            return
        self.query_one(IncomeField).prompt_view = self.session.view()


def run_terminal_session(app: Optional[BudgetApp] = None, headless: bool = False) -> Optional[RenderModel]:
    """Run the terminal app to completion and return the view to print afterwards."""
    app = app or BudgetApp()
    try:
        result = app.run(headless=headless)
    except Exception as e:
        raise RuntimeStartupFailure(str(e) or type(e).__name__) from e

    if app.return_code:
        raise RuntimeStartupFailure(f"terminal app exited with code {app.return_code}")

    logger.debug("terminal session ended with %r", result)
    return result
