"""Entry point for `python -m app`."""

import sys

from rich.console import Console

from app.render import DEFAULT_STYLE, render_view
from app.terminal import run_terminal_session
from budget.config import Config
from budget.errors import RuntimeStartupFailure
from budget.logger import setup_logger


def main() -> None:
    logger = setup_logger("budget", Config.LOG_LEVEL)

    try:
        view = run_terminal_session()
    except RuntimeStartupFailure as e:
        logger.error("terminal session failed", exc_info=True)
        Console(stderr=True).print(f"There has been an error: {e}", markup=False, highlight=False)
        sys.exit(1)

    # Nothing is printed after a cancel.
    if view is not None:
        Console().print(render_view(view, DEFAULT_STYLE))


if __name__ == "__main__":
    main()
