import os.path
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional

from create_ignite.config import Config, UIAdapter, get_config, loader
from create_ignite.config.version import get_version
from create_ignite.log import setup
from create_ignite.project.cache import ConfigStore, FileConfigStore, NullConfigStore
from create_ignite.ui.base import UIBase
from create_ignite.ui.console import PlainConsoleUI
from create_ignite.ui.virtual import VirtualUI

DEFAULT_CONFIG_FILE = "config.json"


def parse_arguments(argv: Optional[list[str]] = None) -> Namespace:
    """
    Parse command-line arguments.

    Available arguments:
        project_name: Name of the project to create (asked interactively if omitted)
        --help: Show the help message
        --config: Path to the configuration file
        --show-config: Output the current configuration to stdout
        --level: Log level (debug,info,warning,error,critical)
        --version: Show the version and exit

    :param argv: Arguments to parse (default: `sys.argv`).
    :return: Parsed arguments object.
    """
    version = get_version()

    parser = ArgumentParser(prog="create-ignite", description="Universal project scaffolder")
    parser.add_argument("project_name", nargs="?", help="Name of the project to create")
    parser.add_argument("--config", help="Path to the configuration file", default=DEFAULT_CONFIG_FILE)
    parser.add_argument("--show-config", help="Output the current configuration to stdout", action="store_true")
    parser.add_argument("--level", help="Log level (debug,info,warning,error,critical)", required=False)
    parser.add_argument("--version", action="version", version=version)
    return parser.parse_args(argv)


def load_config(args: Namespace) -> Optional[Config]:
    """
    Load JSON configuration file and apply command-line arguments.

    A missing configuration file means the default configuration is used.

    :param args: Command-line arguments (at least `config` must be present).
    :return: Configuration object, or None if config couldn't be loaded.
    """
    if not os.path.isfile(args.config):
        if args.config != DEFAULT_CONFIG_FILE:
            print(f"Configuration file not found: {args.config}; using default", file=sys.stderr)
        config = get_config()
    else:
        try:
            config = loader.load(args.config)
        except ValueError as err:
            print(f"Error parsing config file {args.config}: {err}", file=sys.stderr)
            return None

    if args.level:
        config.log.level = args.level.upper()

    try:
        Config.model_validate(config.model_dump())
    except ValueError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return None

    return config


def show_config():
    """
    Print the current configuration to stdout.
    """
    cfg = get_config()
    print(cfg.model_dump_json(indent=2))


def create_ui(config: Config) -> UIBase:
    if config.ui.type == UIAdapter.VIRTUAL:
        return VirtualUI(config.ui.inputs)
    return PlainConsoleUI()


def create_store(config: Config) -> ConfigStore:
    if not config.cache.enabled:
        return NullConfigStore()
    return FileConfigStore(os.path.expanduser(config.cache.path))


def init(argv: Optional[list[str]] = None) -> tuple[Optional[UIBase], Optional[Config], Namespace]:
    """
    Initialize the application.

    Loads configuration, sets up logging and UI.

    :param argv: Command-line arguments (default: `sys.argv`).
    :return: Tuple with UI, configuration and command-line arguments.
    """
    args = parse_arguments(argv)
    config = load_config(args)
    if not config:
        return (None, None, args)

    setup(config.log, force=True)
    ui = create_ui(config)

    return (ui, config, args)


__all__ = ["parse_arguments", "load_config", "show_config", "create_ui", "create_store", "init"]
