import json
from os import makedirs
from os.path import dirname, isfile
from typing import Optional

from pydantic import ValidationError

from create_ignite.log import get_logger
from create_ignite.project.models import ProjectConfiguration

log = get_logger(__name__)


class ConfigStore:
    """
    Storage for the last used project configuration.

    There is a single slot: every save overwrites the previous record.
    Stores never raise on I/O problems; a failed load looks like an
    empty store and a failed save is reported through the return value.
    """

    def load(self) -> Optional[ProjectConfiguration]:
        """
        Load the last saved configuration.

        :return: The stored configuration, or None if there is none (or it can't be read).
        """
        raise NotImplementedError()

    def save(self, config: ProjectConfiguration) -> bool:
        """
        Save the configuration, replacing any previous one.

        :param config: Configuration to store.
        :return: True if the configuration was saved.
        """
        raise NotImplementedError()


class FileConfigStore(ConfigStore):
    """
    Store the configuration as a flat JSON record in a file.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[ProjectConfiguration]:
        if not isfile(self.path):
            log.debug(f"No saved configuration at {self.path}")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as fp:
                config = ProjectConfiguration.model_validate_json(fp.read())
        except (OSError, ValueError) as err:
            # pydantic's ValidationError is a ValueError
            log.warning(f"Could not load saved configuration from {self.path}: {err}")
            return None

        log.debug(f"Loaded saved configuration from {self.path}")
        return config

    def save(self, config: ProjectConfiguration) -> bool:
        try:
            parent = dirname(self.path)
            if parent:
                makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fp:
                fp.write(json.dumps(config.to_record(), indent=2))
        except OSError as err:
            log.warning(f"Could not save configuration to {self.path}: {err}")
            return False

        log.debug(f"Saved configuration to {self.path}")
        return True


class MemoryConfigStore(ConfigStore):
    """
    Keep the configuration in memory (no persistence across runs).
    """

    def __init__(self, config: Optional[ProjectConfiguration] = None):
        self.record = config.to_record() if config else None

    def load(self) -> Optional[ProjectConfiguration]:
        if self.record is None:
            return None
        try:
            return ProjectConfiguration.model_validate(self.record)
        except ValidationError as err:
            log.warning(f"Could not load saved configuration: {err}")
            return None

    def save(self, config: ProjectConfiguration) -> bool:
        self.record = config.to_record()
        return True


class NullConfigStore(ConfigStore):
    """
    Store that never remembers anything (caching disabled).

    Saving is a no-op that always succeeds.
    """

    def load(self) -> Optional[ProjectConfiguration]:
        return None

    def save(self, config: ProjectConfiguration) -> bool:
        return True


__all__ = ["ConfigStore", "FileConfigStore", "MemoryConfigStore", "NullConfigStore"]
