import logging
import re

from budget.config import Config
from budget.errors import NotANumber
from budget.events import (
    BACKSPACE, CTRL_A, CTRL_E, CTRL_K, CTRL_U, DELETE, END, HOME, LEFT, RIGHT,
    KeyEvent, KeyMap,
)

logger = logging.getLogger(__name__)

# Optional sign, ASCII digits only. int() alone would also take " 12", "1_0" and non-ASCII digits.
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class InputController:
    """Single-line editable buffer holding the income as typed."""

    def __init__(self, char_limit: int = Config.CHAR_LIMIT):
        self.char_limit = char_limit
        self.cancelled = False
        self._value = ""
        self._cursor = 0

        self._keys = KeyMap()
        self._keys.bind(BACKSPACE, self.backspace)
        self._keys.bind(DELETE, self.delete)
        self._keys.bind(LEFT, self.move_left)
        self._keys.bind(RIGHT, self.move_right)
        self._keys.bind_all([HOME, CTRL_A], self.move_home)
        self._keys.bind_all([END, CTRL_E], self.move_end)
        self._keys.bind(CTRL_U, self.delete_before_cursor)
        self._keys.bind(CTRL_K, self.delete_after_cursor)

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    def handle(self, event: KeyEvent) -> bool:
        if self._keys.dispatch(event):
            return True
        if event.char and event.char.isprintable():
            self.insert(event.char)
            return True
        return False

    def insert(self, text: str) -> None:
        room = self.char_limit - len(self._value)
        if room <= 0:
            return
        text = text[:room]
        self._value = self._value[:self._cursor] + text + self._value[self._cursor:]
        self._cursor += len(text)

    def set_value(self, text: str) -> None:
        self._value = text[:self.char_limit]
        self._cursor = len(self._value)

    def backspace(self) -> None:
        if self._cursor == 0:
            return
        self._value = self._value[:self._cursor - 1] + self._value[self._cursor:]
        self._cursor -= 1

    def delete(self) -> None:
        self._value = self._value[:self._cursor] + self._value[self._cursor + 1:]

    def move_left(self) -> None:
        self._cursor = max(0, self._cursor - 1)

    def move_right(self) -> None:
        self._cursor = min(len(self._value), self._cursor + 1)

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._value)

    def delete_before_cursor(self) -> None:
        self._value = self._value[self._cursor:]
        self._cursor = 0

    def delete_after_cursor(self) -> None:
        self._value = self._value[:self._cursor]

    def submit(self) -> int:
        """Parse the buffer as a base-10 integer, raising NotANumber when it is not one."""
        if not INTEGER_LITERAL.fullmatch(self._value):
            raise NotANumber(self._value)
        return int(self._value)

    def cancel(self) -> None:
        logger.debug("input cancelled with buffer %r", self._value)
        self.cancelled = True
