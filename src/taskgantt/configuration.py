# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import platformdirs

APP_NAME = "taskgantt"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Configuration(TypedDict):
    gantt_width: int
    min_bar_width: int
    row_height: int
    left_column_width: int
    show_header: bool
    log_level: LogLevel
