# SPDX-License-Identifier: MIT

from bizcal import configuration
from bizcal.logger import configure_logging
from bizcal.repository.configuration import CONFIGURATION_REPO
from bizcal.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)

    # First run writes the defaults, including the generated user id
    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    view_state.set_use_color(config["use_color"])
