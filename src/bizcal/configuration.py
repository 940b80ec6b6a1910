# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "bizcal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Moved by set_data_path() when a data_path is configured
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_DIR: Path = DATA_PATH / "events"
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"
DATA_CLIENTS_PATH: Path = DATA_PATH / "clients.yaml"


class Configuration(TypedDict):
    user_id: str
    data_path: Optional[str]
    default_view_mode: str
    show_header: bool
    use_color: bool
    log_level: str


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_EVENTS_DIR, DATA_PROJECTS_PATH, DATA_CLIENTS_PATH

    DATA_PATH = data_path
    DATA_EVENTS_DIR = DATA_PATH / "events"
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"
    DATA_CLIENTS_PATH = DATA_PATH / "clients.yaml"


def load_data_path_configuration() -> None:
    """Point the stores at the user's data_path setting, if there is one.

    Runs at startup, before the first repository read.
    """
    if not APP_CONFIG_PATH.is_file():
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
