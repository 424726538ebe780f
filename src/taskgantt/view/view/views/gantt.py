# SPDX-License-Identifier: MIT

import math
from typing import Optional, TypeAlias

import pendulum
from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from taskgantt.color import (
    OPEN_GROUP_FILL_STYLE,
    SELECTED_ROW_STYLE,
    get_state_color,
)
from taskgantt.model.gantt_row import GanttRow
from taskgantt.service.duration import DEFAULT_GANTT_WIDTH
from taskgantt.service.row import flatten_rows
from taskgantt.time import datetime_to_display_local_datetime_str_optional
from taskgantt.view.view.util import fit_to_width, task_label
from taskgantt.view.view.views.header import header

BAR_CHAR = "█"
QUEUED_CHAR = "░"
TASK_FAIL_CHAR = "▒"
OPEN_GROUP_FILL_CHAR = "┈"

Cell: TypeAlias = tuple[str, str]


def gantt_view(
    console: Console,
    run_id: Optional[str],
    rows: list[GanttRow],
    gantt_start_date: Optional[pendulum.DateTime],
    gantt_end_date: Optional[pendulum.DateTime],
    gantt_width: float = DEFAULT_GANTT_WIDTH,
    columns: Optional[int] = None,
    left_column_width: int = 40,
) -> None:
    """
    Display laid out gantt rows on a terminal timeline.

    Pixel geometry is scaled onto the available columns, so the chart keeps
    the proportions it was laid out with whatever the terminal width.

    Args:
        console: Console to print to
        run_id: The run whose instances are displayed
        rows: Root rows, children are printed below their open group
        gantt_start_date: Left edge of the chart window
        gantt_end_date: Right edge of the chart window
        gantt_width: Pixel width the rows were laid out for
        columns: Number of timeline columns (defaults to the remaining console width)
        left_column_width: Width of left column for task names (defaults to 40)
    """
    header(console, run_id, "gantt")

    if not rows:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    if columns is None:
        columns = max(console.width - left_column_width, 10)

    start_str = datetime_to_display_local_datetime_str_optional(gantt_start_date)
    end_str = datetime_to_display_local_datetime_str_optional(gantt_end_date)
    console.print(
        f"\n[bold]{start_str or '?'} to {end_str or '?'}[/bold] (width: {gantt_width}px)\n"
    )

    chart_elements: list[Text] = [
        Text("─" * (left_column_width + columns), style="dim")
    ]
    for row in flatten_rows(rows):
        chart_elements.append(
            build_gantt_row(row, gantt_width, columns, left_column_width)
        )

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def build_gantt_row(
    row: GanttRow,
    gantt_width: float,
    columns: int,
    left_column_width: int = 40,
) -> Text:
    """
    Build the text line of one row: the task name followed by its timeline.

    Args:
        row: The laid out row
        gantt_width: Pixel width the row was laid out for
        columns: Number of timeline columns
        left_column_width: Width of the left column

    Returns:
        Rich Text object with the row
    """
    text = Text()

    if row["is_open"] and row["task"]["children"]:
        chevron = "▼ "
    elif row["task"]["children"]:
        chevron = "▶ "
    else:
        chevron = "  "
    left_col = fit_to_width(
        "  " * row["depth"] + chevron + task_label(row["task"]), left_column_width
    )
    label_style = "bold" if row["emphasize_border"] else ""
    if row["is_selected"]:
        label_style = f"{label_style} {SELECTED_ROW_STYLE}".strip()
    text.append(left_col, style=label_style)

    for char, style in build_timeline_cells(row, gantt_width, columns):
        text.append(char, style=style)

    return text


def build_timeline_cells(
    row: GanttRow, gantt_width: float, columns: int
) -> list[Cell]:
    """Characters and styles of each timeline column of the row."""
    background = SELECTED_ROW_STYLE if row["is_selected"] else ""
    if row["emphasize_border"]:
        fill: Cell = (
            OPEN_GROUP_FILL_CHAR,
            f"{OPEN_GROUP_FILL_STYLE} {background}".strip(),
        )
    else:
        fill = (" ", background)
    cells: list[Cell] = [fill] * columns

    instance = row["instance"]
    geometry = row["geometry"]
    if instance is not None and geometry is not None:
        bar_start = geometry["offset_margin"]
        if row["show_queued_segment"]:
            _paint(
                cells,
                bar_start,
                geometry["queued_width"],
                QUEUED_CHAR,
                f"{get_state_color('queued')} {background}".strip(),
                gantt_width,
            )
            bar_start += geometry["queued_width"]
        _paint(
            cells,
            bar_start,
            geometry["width"],
            BAR_CHAR,
            f"{get_state_color(instance['state'])} {background}".strip(),
            gantt_width,
        )

    # Earlier failures are drawn over the bar
    for marker in row["task_fails"]:
        _paint(
            cells,
            marker["offset_margin"],
            marker["width"],
            TASK_FAIL_CHAR,
            f"{get_state_color('failed')} {background}".strip(),
            gantt_width,
        )

    return cells


def _paint(
    cells: list[Cell],
    offset_px: float,
    width_px: float,
    char: str,
    style: str,
    gantt_width: float,
) -> None:
    columns = len(cells)
    start = math.floor(offset_px * columns / gantt_width)
    end = math.ceil((offset_px + width_px) * columns / gantt_width)
    # Anything drawn takes at least one column
    if end <= start:
        end = start + 1
    for i in range(max(start, 0), min(end, columns)):
        cells[i] = (char, style)
