# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from momentum import configuration


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

        # Fill in settings added after the config file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
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
        store_url: Optional[str] = None,
        remove_store_url: bool = False,
        store_path: Optional[str] = None,
        remove_store_path: bool = False,
        request_timeout: Optional[float] = None,
        youtube_api_key: Optional[str] = None,
        remove_youtube_api_key: bool = False,
        meditation_minutes: Optional[int] = None,
        yoga_minutes: Optional[int] = None,
        dance_minutes: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if store_url is not None:
            self.config["store_url"] = store_url
        if remove_store_url:
            self.config["store_url"] = None
        if store_path is not None:
            self.config["store_path"] = store_path
        if remove_store_path:
            self.config["store_path"] = None
        if request_timeout is not None:
            self.config["request_timeout"] = request_timeout
        if youtube_api_key is not None:
            self.config["youtube_api_key"] = youtube_api_key
        if remove_youtube_api_key:
            self.config["youtube_api_key"] = None
        if meditation_minutes is not None:
            self.config["meditation_minutes"] = meditation_minutes
        if yoga_minutes is not None:
            self.config["yoga_minutes"] = yoga_minutes
        if dance_minutes is not None:
            self.config["dance_minutes"] = dance_minutes
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
