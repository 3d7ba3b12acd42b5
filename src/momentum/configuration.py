# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "momentum"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STATE_PATH: Path = DATA_PATH / "state.yaml"


class Configuration(TypedDict):
    store_url: Optional[str]
    store_path: Optional[str]
    request_timeout: float
    youtube_api_key: Optional[str]
    meditation_minutes: int
    yoga_minutes: int
    dance_minutes: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "store_url": None,
        "store_path": None,
        "request_timeout": 10.0,
        "youtube_api_key": None,
        "meditation_minutes": 10,
        "yoga_minutes": 7,
        "dance_minutes": 10,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_STATE_PATH variable dynamically.

    This must be called after the config file exists and before a local
    state store is opened.
    """
    global DATA_STATE_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    store_path_setting = config.get("store_path")
    if store_path_setting is not None:
        DATA_STATE_PATH = Path(store_path_setting)
