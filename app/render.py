"""Rich renderables for the budget view models."""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.console import Group, RenderableType
from rich.style import Style
from rich.table import Table
from rich.text import Text

from budget.config import Config
from budget.view import ErrorView, PromptView, RenderModel, TableView


@dataclass(frozen=True)
class TableStyle:
    """Styling handed to the presentation layer; the core never sees it."""

    border: box.Box = box.SQUARE
    header_color: str = "color(182)"
    column_widths: tuple[int, ...] = (20, 10, 10)
    input_width: int = Config.INPUT_WIDTH
    prompt_marker: str = "> "
    error_color: str = "red"


DEFAULT_STYLE = TableStyle()


def render_prompt(view: PromptView, style: TableStyle = DEFAULT_STYLE, cursor_visible: bool = True) -> RenderableType:
    field = Text(style.prompt_marker)
    if view.current_buffer:
        text = view.current_buffer.ljust(max(view.cursor + 1, len(view.current_buffer)))
        field.append(text[: view.cursor])
        field.append(text[view.cursor], style=Style(reverse=cursor_visible))
        field.append(text[view.cursor + 1 :])
    else:
        placeholder = view.placeholder or " "
        field.append(placeholder[0], style=Style(reverse=cursor_visible, dim=True))
        field.append(placeholder[1:], style="dim")
    field.truncate(style.input_width + len(style.prompt_marker))

    return Group(
        Text(view.prompt),
        Text(""),
        field,
        Text(""),
        Text(view.hint),
    )


def render_table(view: TableView, style: TableStyle = DEFAULT_STYLE) -> Table:
    table = Table(box=style.border, header_style=style.header_color)
    for title, width in zip(view.columns, style.column_widths):
        table.add_column(title, width=width, no_wrap=True)
    for row in view.rows:
        table.add_row(*row)
    return table


def render_error(view: ErrorView, style: TableStyle = DEFAULT_STYLE) -> Text:
    return Text(view.error_message, style=style.error_color)


def render_view(view: RenderModel, style: TableStyle = DEFAULT_STYLE) -> RenderableType:
    if isinstance(view, PromptView):
        return render_prompt(view, style)
    if isinstance(view, ErrorView):
        return render_error(view, style)
    return render_table(view, style)
