import logging
from typing import Optional, Sequence, Tuple

from budget.allocation import allocate
from budget.domain import DEFAULT_CATEGORIES, Category
from budget.errors import NotANumber
from budget.events import CTRL_C, ENTER, ESCAPE, KeyEvent, KeyMap
from budget.input import InputController
from budget.state import AwaitingInput, InputRejected, ResultReady, SessionState
from budget.view import RenderModel, build_view_model

logger = logging.getLogger(__name__)


class SessionController:
    """Runs one income allocation: collect keystrokes, then a single result or a single error.

    Every event goes to the input field first, then to the session keys
    (enter submits, escape and ctrl+c cancel). Once the session has produced
    a result, rejected its input or been cancelled, further events are ignored.
    """

    def __init__(self, categories: Sequence[Category] = DEFAULT_CATEGORIES,
                 input_controller: Optional[InputController] = None):
        if not categories:
            raise ValueError("a session needs at least one category")
        self._categories: Tuple[Category, ...] = tuple(categories)
        self.input = input_controller or InputController()
        self._state: SessionState = AwaitingInput(self.input.value, self.input.cursor)

        self._keys = KeyMap()
        self._keys.bind(ENTER, self.submit)
        self._keys.bind_all([ESCAPE, CTRL_C], self.cancel)

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self.input.cancelled

    @property
    def finished(self) -> bool:
        return self.cancelled or not isinstance(self._state, AwaitingInput)

    def handle(self, event: KeyEvent) -> SessionState:
        if self.finished:
            logger.debug("session finished, ignoring %s", event.key)
            return self._state

        self.input.handle(event)
        if not self._keys.dispatch(event) and not self.finished:
            self._state = AwaitingInput(self.input.value, self.input.cursor)
        return self._state

    def submit(self) -> None:
        if self.finished:
            return
        try:
            income = self.input.submit()
        except NotANumber as e:
            logger.info("input rejected: %s", e)
            self._state = InputRejected()
            return

        self._state = ResultReady(allocate(income, self._categories))
        logger.info("allocated income %d across %d categories", income, len(self._categories))

    def cancel(self) -> None:
        if self.finished:
            return
        self.input.cancel()
        logger.info("session cancelled")

    def view(self) -> RenderModel:
        return build_view_model(self._state)
