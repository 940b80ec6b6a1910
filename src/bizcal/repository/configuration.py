# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bizcal import configuration
from bizcal.model.entity_id import generate_entity_id
from bizcal.model.view_mode import ViewMode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_config() -> configuration.Configuration:
    return {
        "user_id": generate_entity_id(),
        "data_path": None,
        "default_view_mode": ViewMode.DAY.value,
        "show_header": True,
        "use_color": True,
        "log_level": "WARNING",
    }


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
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Back-fill keys missing from older or hand-edited config files
        defaults = get_default_config()
        if loaded is None:
            self._config = defaults
            self.is_dirty = True
            return
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
                self.is_dirty = True
        self._config = loaded

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        user_id: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_view_mode: Optional[ViewMode] = None,
        show_header: Optional[bool] = None,
        use_color: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
            )
        self.is_dirty = True

        if user_id is not None:
            self.config["user_id"] = user_id
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_view_mode is not None:
            self.config["default_view_mode"] = default_view_mode.value
        if show_header is not None:
            self.config["show_header"] = show_header
        if use_color is not None:
            self.config["use_color"] = use_color
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
