# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskgantt import configuration
from taskgantt.template.configuration import get_configuration_template

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        logger.debug("Loading configuration from %s", configuration.APP_CONFIG_PATH)
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is empty"
            )

        # Fill in settings added after the file was written
        for key, value in get_configuration_template().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reads the file again."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        gantt_width: Optional[int] = None,
        min_bar_width: Optional[int] = None,
        row_height: Optional[int] = None,
        left_column_width: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[configuration.LogLevel] = None,
    ) -> None:
        self.is_dirty = True

        if gantt_width is not None:
            self.config["gantt_width"] = gantt_width
        if min_bar_width is not None:
            self.config["min_bar_width"] = min_bar_width
        if row_height is not None:
            self.config["row_height"] = row_height
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
