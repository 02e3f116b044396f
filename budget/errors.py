"""
Exceptions raised by the budget core and the terminal runner.
"""


class InputError(ValueError):
    """The income typed by the user could not be used."""


class NotANumber(InputError):
    def __init__(self, raw: str):
        super().__init__(f"not an integer: {raw!r}")
        self.raw = raw


class RuntimeStartupFailure(RuntimeError):
    """The terminal event loop failed to start or to run to completion."""
