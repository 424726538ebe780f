# SPDX-License-Identifier: MIT

from taskgantt.model.task_state import TaskState

# Rich colors for each task state, close to the web UI palette
STATE_COLORS: dict[str, str] = {
    "success": "green",
    "running": "bright_green",
    "failed": "red",
    "upstream_failed": "dark_orange",
    "skipped": "hot_pink",
    "up_for_retry": "gold1",
    "up_for_reschedule": "turquoise2",
    "queued": "grey62",
    "scheduled": "tan",
    "deferred": "medium_purple",
    "removed": "grey84",
    "restarting": "violet",
}

NO_STATUS_COLOR = "white"

SELECTED_ROW_STYLE = "on navy_blue"
OPEN_GROUP_FILL_STYLE = "grey42"


def get_state_color(state: TaskState) -> str:
    if state is None:
        return NO_STATUS_COLOR
    return STATE_COLORS.get(state, NO_STATUS_COLOR)
