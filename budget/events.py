from typing import Callable, Dict, List, NamedTuple

__all__ = [
    'KeyEvent', 'KeyMap',
    'ENTER', 'ESCAPE', 'CTRL_C', 'BACKSPACE', 'DELETE',
    'LEFT', 'RIGHT', 'HOME', 'END', 'CTRL_A', 'CTRL_E', 'CTRL_U', 'CTRL_K', 'PASTE',
]

# Key names follow the ones textual reports in events.Key.key
ENTER = "enter"
ESCAPE = "escape"
CTRL_C = "ctrl+c"
BACKSPACE = "backspace"
DELETE = "delete"
LEFT = "left"
RIGHT = "right"
HOME = "home"
END = "end"
CTRL_A = "ctrl+a"
CTRL_E = "ctrl+e"
CTRL_U = "ctrl+u"
CTRL_K = "ctrl+k"
PASTE = "paste"  # pasted text travels in char and is never matched as a key binding


class KeyEvent(NamedTuple):
    key: str
    char: str = ""  # printable text carried by the key, empty for control keys


class KeyMap:
    def __init__(self):
        self._handlers: Dict[str, List[Callable[[], None]]] = {}

    def bind(self, key: str, handler: Callable[[], None]) -> None:
        if key not in self._handlers:
            self._handlers[key] = []
        self._handlers[key].append(handler)

    def bind_all(self, keys: List[str], handler: Callable[[], None]) -> None:
        for key in keys:
            self.bind(key, handler)

    def dispatch(self, event: KeyEvent) -> bool:
        """Run the handlers bound to ``event.key``; return False when there are none."""
        handlers = self._handlers.get(event.key)
        if not handlers:
            return False

        for handler in list(handlers):
            handler()
        return True
