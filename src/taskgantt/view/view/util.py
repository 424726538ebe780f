# SPDX-License-Identifier: MIT

from taskgantt.model.task import Task


def task_label(task: Task) -> str:
    return task["label"] or task["id"] or "[no id]"


def fit_to_width(text: str, width: int) -> str:
    """Truncate with an ellipsis or pad so the text fills exactly width cells."""
    if len(text) > width:
        return text[: max(width - 3, 0)] + "..."
    return text.ljust(width)
