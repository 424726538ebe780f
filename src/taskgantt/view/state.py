"""View settings held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Header above the chart, on unless the config or --no-header turns it off
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether gantt_view prints the application header before the chart."""
    return _show_header_var.get()
