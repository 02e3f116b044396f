"""
Compiled-in settings of the calculator.
"""

import os
from typing import Final


class Config:
    CHAR_LIMIT: Final[int] = 5
    INPUT_WIDTH: Final[int] = 20
    PLACEHOLDER: Final[str] = "Euro amount"
    PROMPT: Final[str] = "Input income?"
    HINT: Final[str] = "Press 'esc' to quit"
    ERROR_MESSAGE: Final[str] = "There was an error reading your input"
    LOG_LEVEL: Final[str] = os.getenv("BUDGET_LOG_LEVEL", "WARNING")
