# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from projectline import configuration
from projectline.model.timeline import TimelineSort, TimelineSortOption


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: Add sort_title_ignore_case field if it doesn't exist
        if "sort_title_ignore_case" not in self._config:
            self._config["sort_title_ignore_case"] = False
        if "show_header" not in self._config:
            self._config["show_header"] = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_default_sort(self) -> TimelineSort:
        return {
            "option": TimelineSortOption(self.config["default_sort_option"]),
            "ascending": self.config["default_sort_ascending"],
        }

    def update_config(
        self,
        current_user_id: Optional[str] = None,
        remove_current_user_id: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        default_sort_option: Optional[TimelineSortOption] = None,
        default_sort_ascending: Optional[bool] = None,
        sort_title_ignore_case: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if current_user_id is not None:
            self.config["current_user_id"] = current_user_id
        if remove_current_user_id:
            self.config["current_user_id"] = None
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if default_sort_option is not None:
            self.config["default_sort_option"] = str(default_sort_option)
        if default_sort_ascending is not None:
            self.config["default_sort_ascending"] = default_sort_ascending
        if sort_title_ignore_case is not None:
            self.config["sort_title_ignore_case"] = sort_title_ignore_case


CONFIGURATION_REPO = ConfigurationRepository()
