from enum import Enum
from os.path import abspath, dirname, expanduser, join
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

ROOT_DIR = abspath(join(dirname(__file__), "..", ".."))

# Single "last used" configuration slot, shared by all runs of the tool
CONFIG_FILE_NAME = ".ignite-config.json"
MIN_NODE_VERSION = "16.0.0"


class _StrictModel(BaseModel):
    """
    Pydantic parser configuration options.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class UIAdapter(str, Enum):
    """
    Supported UI adapters.
    """

    PLAIN = "plain"
    VIRTUAL = "virtual"


class LogConfig(_StrictModel):
    """
    Configuration for logging.
    """

    level: str = Field(
        "INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    format: str = Field(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="Logging format",
    )
    output: Optional[str] = Field(
        None,
        description="Output file for logs (if not specified, logs are printed to stderr)",
    )


class PlainUIConfig(_StrictModel):
    """
    Configuration for plaintext console UI.
    """

    type: Literal[UIAdapter.PLAIN] = UIAdapter.PLAIN


class VirtualUIConfig(_StrictModel):
    """
    Configuration for the virtual (scripted) UI.
    """

    type: Literal[UIAdapter.VIRTUAL] = UIAdapter.VIRTUAL
    inputs: list[Any]


UIConfig = Annotated[
    Union[PlainUIConfig, VirtualUIConfig],
    Field(discriminator="type"),
]


class CacheConfig(_StrictModel):
    """
    Configuration for the "last used" project configuration cache.
    """

    enabled: bool = Field(True, description="Whether to offer and store the last used configuration")
    path: str = Field(
        join(expanduser("~"), CONFIG_FILE_NAME),
        description="Location of the cached configuration file",
    )


class InstallConfig(_StrictModel):
    """
    Configuration for running package manager commands.
    """

    max_retries: int = Field(
        3,
        description="Maximum number of attempts for each package install command",
        ge=1,
    )
    retry_delay: float = Field(
        2.0,
        description="Delay (in seconds) before the first retry, doubled after every failed attempt",
        ge=0.0,
    )
    timeout: float = Field(
        600.0,
        description="Timeout (in seconds) for a single scaffolding or install command",
        gt=0.0,
    )


class NodeConfig(_StrictModel):
    """
    Configuration for the Node.js preflight check.
    """

    check: bool = Field(True, description="Whether to verify the installed Node.js version before starting")
    min_version: str = Field(
        MIN_NODE_VERSION,
        description="Minimum supported Node.js version",
        pattern=r"^\d+\.\d+\.\d+$",
    )

    @property
    def min_version_info(self) -> tuple[int, int, int]:
        """Minimum version as a comparable (major, minor, patch) tuple."""
        major, minor, patch = self.min_version.split(".")
        return int(major), int(minor), int(patch)


class Config(_StrictModel):
    """
    create-ignite configuration
    """

    log: LogConfig = LogConfig()
    ui: UIConfig = PlainUIConfig()
    cache: CacheConfig = CacheConfig()
    install: InstallConfig = InstallConfig()
    node: NodeConfig = NodeConfig()


class ConfigLoader:
    """
    Configuration loader takes care of loading and parsing configuration files.

    The default loader is already initialized as `create_ignite.config.loader`. To
    load the configuration from a file, use `create_ignite.config.loader.load(path)`.

    To get the current configuration, use `create_ignite.config.get_config()`.
    """

    config: Config
    config_path: Optional[str]

    def __init__(self):
        self.config_path = None
        self.config = Config()

    @staticmethod
    def _remove_json_comments(json_str: str) -> str:
        """
        Remove comments from a JSON string.

        Removes all lines that start with "//" from the JSON string.

        :param json_str: JSON string with comments.
        :return: JSON string without comments.
        """
        return "\n".join([line for line in json_str.splitlines() if not line.strip().startswith("//")])

    @classmethod
    def from_json(cls: "ConfigLoader", config: str) -> Config:
        """
        Parse JSON Into a Config object.

        :param config: JSON string to parse.
        :return: Config object.
        """
        return Config.model_validate_json(cls._remove_json_comments(config))

    def load(self, path: str) -> Config:
        """
        Load a configuration from a file.

        :param path: Path to the configuration file.
        :return: Config object.
        """
        with open(path, "rb") as f:
            raw_config = f.read()

        if b"\x00" in raw_config:
            encoding = "utf-16"
        else:
            encoding = "utf-8"

        text_config = raw_config.decode(encoding)
        self.config = self.from_json(text_config)
        self.config_path = path
        return self.config


loader = ConfigLoader()


def get_config() -> Config:
    """
    Return current configuration.

    :return: Current configuration object.
    """
    return loader.config


__all__ = ["loader", "get_config"]
