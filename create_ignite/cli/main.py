import os
import sys
import traceback
from argparse import Namespace
from asyncio import run
from typing import Optional

from create_ignite.cli.helpers import create_store, init, show_config
from create_ignite.config import Config
from create_ignite.config.version import get_version
from create_ignite.log import get_logger
from create_ignite.proc.process_manager import ProcessManager
from create_ignite.project.compat import ConfigurationError
from create_ignite.project.models import ProjectNameError, validate_project_name
from create_ignite.project.resolver import ConfigurationResolver
from create_ignite.steps.base import StepError
from create_ignite.steps.folder import ask_project_name, confirm_empty_folder
from create_ignite.steps.orchestrator import Orchestrator
from create_ignite.steps.preflight import check_node_version
from create_ignite.ui.base import UIBase, UIClosedError, ignite_source

log = get_logger(__name__)

ISSUES_URL = "https://github.com/kasimkazmi/create-ignite/issues"


def error_hint(message: str) -> Optional[str]:
    """
    Suggest a fix for a failure, based on the error message.

    :param message: Error message.
    :return: Hint to show to the user, or None.
    """
    lower = message.lower()
    if "eacces" in lower or "permission denied" in lower:
        return "Try running with elevated privileges"
    if "enoent" in lower or "no such file" in lower:
        return "File or directory not found. Check if path is correct"
    if "enotfound" in lower or "network" in lower:
        return "Check your internet connection and try again"
    if "npm" in lower or "install" in lower:
        return "Try clearing npm cache: npm cache clean --force"
    return None


def debug_enabled() -> bool:
    """Whether the `DEBUG` environment variable asks for stack traces."""
    return os.environ.get("DEBUG", "").strip().lower() not in ("", "0", "false", "no", "off")


async def report_error(ui: UIBase, err: Exception):
    """
    Show an error to the user.

    The stack trace is only shown if the `DEBUG` environment variable is on.

    :param ui: User interface.
    :param err: The error to report.
    """
    lines = [f"Error: {err}"]

    hint = error_hint(str(err))
    if hint:
        lines.append(f"Tip: {hint}")

    if debug_enabled():
        lines.append("Stack trace:")
        lines.append("".join(traceback.format_exception(type(err), err, err.__traceback__)).rstrip())
    else:
        lines.append("Run with DEBUG=true for detailed error information")

    lines.append(f"If the problem persists, please report it at: {ISSUES_URL}")
    await ui.send_message("\n".join(lines), source=ignite_source)


async def get_project_name(ui: UIBase, args: Namespace) -> Optional[str]:
    """
    Get the project name from the command line, or ask for it.

    :param ui: User interface.
    :param args: Command-line arguments.
    :return: Valid project name, or None if the one given on the command line is invalid.
    """
    if args.project_name is None:
        return await ask_project_name(ui, "Project name:")

    try:
        return validate_project_name(args.project_name)
    except ProjectNameError as err:
        await ui.send_message(f"Invalid project name {args.project_name!r}: {err}", source=ignite_source)
        return None


async def run_ignite_session(ui: UIBase, args: Namespace, config: Config) -> bool:
    """
    Create a new project.

    :param ui: User interface.
    :param args: Command-line arguments.
    :param config: Application configuration.
    :return: True if the project was created (or the user cancelled), False otherwise.
    """
    root_dir = os.getcwd()

    async def output_handler(out: str, err: str):
        await ui.send_stream_chunk(out + err)

    pm = ProcessManager(root_dir=root_dir, output_handler=output_handler)

    if config.node.check:
        await check_node_version(pm, config.node.min_version_info)

    await ui.send_message(
        f"CREATE IGNITE {get_version()} - Universal Project Scaffolder\nLet's create your project!",
        source=ignite_source,
    )

    project_name = await get_project_name(ui, args)
    if not project_name:
        return False

    project_name = await confirm_empty_folder(ui, root_dir, project_name)
    if not project_name:
        await ui.send_message("Setup cancelled", source=ignite_source)
        return True

    resolver = ConfigurationResolver(ui, create_store(config))
    resolution = await resolver.resolve(project_name)
    if resolution.cancelled:
        await ui.send_message("Operation cancelled by user", source=ignite_source)
        return True

    orca = Orchestrator(resolution.config, ui, pm, root_dir=root_dir, app_config=config)
    await orca.run()
    return True


async def async_main(ui: UIBase, args: Namespace, config: Config) -> bool:
    """
    Main application coroutine.

    :param ui: User interface.
    :param args: Command-line arguments.
    :param config: Application configuration.
    :return: True if the application ran successfully, False otherwise.
    """
    if args.show_config:
        show_config()
        return True

    ui_started = await ui.start()
    if not ui_started:
        return False

    success = False
    try:
        success = await run_ignite_session(ui, args, config)
    except (KeyboardInterrupt, UIClosedError):
        log.info("Interrupted by user")
        await ui.send_message("Operation cancelled by user", source=ignite_source)
        success = True
    except ConfigurationError as err:
        log.warning(f"Invalid configuration: {err}")
        await ui.send_message(f"Configuration error: {err}", source=ignite_source)
    except StepError as err:
        log.error(f"Step failed with {err.code.value}: {err.message}")
        if err.exec_log:
            log.debug(f"Failed command: {err.exec_log.cmd} (status {err.exec_log.status_code})")
        await ui.send_message("Project setup failed", source=ignite_source)
        await report_error(ui, err)
    except Exception as err:
        log.error(f"Uncaught exception: {err}", exc_info=True)
        await report_error(ui, err)
    finally:
        await ui.stop()

    return success


def run_ignite(argv: Optional[list[str]] = None) -> int:
    ui, config, args = init(argv)
    if not ui or not config:
        return 1
    try:
        success = run(async_main(ui, args, config))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 0
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(run_ignite())
