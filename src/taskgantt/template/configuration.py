# SPDX-License-Identifier: MIT

from taskgantt.configuration import Configuration
from taskgantt.service.duration import DEFAULT_GANTT_WIDTH, MIN_BAR_WIDTH
from taskgantt.service.row import DEFAULT_ROW_HEIGHT


def get_configuration_template() -> Configuration:
    return {
        "gantt_width": DEFAULT_GANTT_WIDTH,
        "min_bar_width": MIN_BAR_WIDTH,
        "row_height": DEFAULT_ROW_HEIGHT,
        "left_column_width": 40,
        "show_header": True,
        "log_level": "WARNING",
    }
