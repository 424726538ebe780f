from rich.console import Console

from taskgantt.service.row import build_row, build_rows
from taskgantt.view import state as view_state
from taskgantt.view.view.views.gantt import (
    BAR_CHAR,
    OPEN_GROUP_FILL_CHAR,
    QUEUED_CHAR,
    TASK_FAIL_CHAR,
    build_gantt_row,
    build_timeline_cells,
    gantt_view,
)
from taskgantt.view.view.views.tooltip import gantt_tooltip

RUN_ID = "scheduled__2024-01-01"
SELECTION = {"run_id": RUN_ID, "task_id": None}


def _chars(cells) -> str:
    return "".join(char for char, _ in cells)


def test_bar_is_scaled_to_columns(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract", start=10, end=30), *window, [], SELECTION, make_fetcher()
    )

    chars = _chars(build_timeline_cells(row, gantt_width=500, columns=50))

    assert chars == " " * 5 + BAR_CHAR * 10 + " " * 35


def test_queued_segment_precedes_bar(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract", queued=2, start=5, end=30),
        *window,
        [],
        SELECTION,
        make_fetcher(),
    )

    cells = build_timeline_cells(row, gantt_width=500, columns=50)

    assert cells[0][0] == " "
    assert cells[1][0] == QUEUED_CHAR
    assert cells[1][1] == "grey62"
    assert _chars(cells[2:15]) == BAR_CHAR * 13
    assert cells[15][0] == " "


def test_frame_only_row_is_blank(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract", run_id="other"), *window, [], SELECTION, make_fetcher()
    )

    assert _chars(build_timeline_cells(row, 500, 20)) == " " * 20


def test_tiny_bar_takes_one_column(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract", start=10, end=10.1), *window, [], SELECTION, make_fetcher()
    )

    chars = _chars(build_timeline_cells(row, gantt_width=500, columns=10))

    assert chars.count(BAR_CHAR) == 1


def test_bar_outside_window_is_clipped(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract", start=-50, end=150), *window, [], SELECTION, make_fetcher()
    )

    assert _chars(build_timeline_cells(row, 500, 10)) == BAR_CHAR * 10


def test_selected_row_has_background(make_task, make_fetcher, window) -> None:
    row = build_row(
        make_task("extract"),
        *window,
        [],
        {"run_id": RUN_ID, "task_id": "extract"},
        make_fetcher(),
    )

    cells = build_timeline_cells(row, 500, 10)

    assert all("on navy_blue" in style for _, style in cells)
    assert cells[2] == (BAR_CHAR, "green on navy_blue")


def test_open_group_is_filled(make_task, make_fetcher, window) -> None:
    group = make_task("group", children=[make_task("group.a")], start=None, end=None)

    open_row = build_row(group, *window, {"group"}, SELECTION, make_fetcher())
    closed_row = build_row(group, *window, set(), SELECTION, make_fetcher())

    open_chars = _chars(build_timeline_cells(open_row, 500, 20))
    closed_chars = _chars(build_timeline_cells(closed_row, 500, 20))
    assert OPEN_GROUP_FILL_CHAR in open_chars
    assert OPEN_GROUP_FILL_CHAR not in closed_chars


def test_task_fails_are_drawn(make_task, make_task_fail, make_fetcher, window) -> None:
    task = make_task("extract", start=50, end=60, try_number=2)
    fetcher = make_fetcher([make_task_fail(start=10, end=20)])
    row = build_row(task, *window, [], SELECTION, fetcher)

    cells = build_timeline_cells(row, gantt_width=500, columns=10)

    assert cells[1] == (TASK_FAIL_CHAR, "red")
    assert cells[5][0] == BAR_CHAR


def test_gantt_row_label_is_indented(make_task, make_fetcher, window) -> None:
    group = make_task("group", children=[make_task("group.a")])
    rows = build_rows([group], *window, {"group"}, SELECTION, make_fetcher())

    group_line = build_gantt_row(rows[0], 500, 10, left_column_width=20)
    child_line = build_gantt_row(rows[0]["children"][0], 500, 10, left_column_width=20)

    assert group_line.plain.startswith("▼ group")
    assert child_line.plain.startswith("    group.a")
    assert len(child_line.plain) == 30


def test_long_labels_are_truncated(make_task, make_fetcher, window) -> None:
    row = build_row(make_task("x" * 50), *window, [], SELECTION, make_fetcher())

    line = build_gantt_row(row, 500, 10, left_column_width=20)

    assert line.plain[:20].endswith("...")


def test_gantt_view_prints_rows(make_task, make_fetcher, window) -> None:
    console = Console(record=True, width=100)
    rows = build_rows(
        [make_task("extract"), make_task("load", start=40, end=80)],
        *window,
        [],
        SELECTION,
        make_fetcher(),
    )

    gantt_view(console, RUN_ID, rows, *window, gantt_width=500, columns=50)

    output = console.export_text()
    assert "taskgantt" in output
    assert RUN_ID in output
    assert "extract" in output
    assert "load" in output


def test_gantt_view_without_header(make_task, make_fetcher, window) -> None:
    view_state.set_show_header(False)
    console = Console(record=True, width=100)
    rows = build_rows([make_task("extract")], *window, [], SELECTION, make_fetcher())

    gantt_view(console, RUN_ID, rows, *window, columns=50)

    assert "taskgantt" not in console.export_text()


def test_gantt_view_without_rows(window) -> None:
    console = Console(record=True, width=100)

    gantt_view(console, RUN_ID, [], *window)

    assert "No tasks to display" in console.export_text()


def test_tooltip_lists_instance_details(make_task) -> None:
    task = make_task("extract", queued=2, start=5, end=30, try_number=3)
    console = Console(record=True, width=100)

    console.print(gantt_tooltip(task, task["instances"][0]))

    output = console.export_text()
    assert "Task" in output
    assert "extract" in output
    assert "success" in output
    assert "Try Number" in output
    assert "3" in output
    assert "Queued Duration" in output
    assert "00:00:03" in output
    assert "00:00:25" in output


def test_tooltip_for_group(make_task) -> None:
    task = make_task("group", children=[make_task("group.a")])
    console = Console(record=True, width=100)

    console.print(gantt_tooltip(task, task["instances"][0]))

    output = console.export_text()
    assert "Task Group" in output
    assert "Overall Duration" in output
