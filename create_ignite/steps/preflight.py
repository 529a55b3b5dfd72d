import re
from typing import Optional

from create_ignite.log import get_logger
from create_ignite.proc.process_manager import ProcessManager
from create_ignite.steps.base import StepError, StepErrorCode

log = get_logger(__name__)

NODE_VERSION_PATTERN = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


def parse_node_version(output: str) -> Optional[tuple[int, int, int]]:
    """
    Parse `node --version` output (eg. "v20.11.1").

    :param output: Command output.
    :return: (major, minor, patch) tuple, or None if the output isn't a version.
    """
    match = NODE_VERSION_PATTERN.search(output)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


async def check_node_version(process_manager: ProcessManager, min_version: tuple[int, int, int]) -> str:
    """
    Check that a recent enough Node.js is installed.

    :param process_manager: Process manager to run `node` with.
    :param min_version: Minimum required (major, minor, patch) version.
    :return: The installed version string.
    :raises StepError: If Node.js is missing or too old.
    """
    required = ".".join(str(part) for part in min_version)
    exec_log = await process_manager.run_command("node --version", show_output=False, timeout=30)
    version = parse_node_version(exec_log.stdout) if exec_log.success else None

    if version is None:
        raise StepError(
            f"Node.js is not installed or could not be run. Required version: {required}+",
            StepErrorCode.NODE_VERSION_TOO_LOW,
            exec_log,
        )

    current = exec_log.stdout.strip()
    if version < min_version:
        raise StepError(
            f"Node.js version {required} or higher is required. Current version: {current}",
            StepErrorCode.NODE_VERSION_TOO_LOW,
            exec_log,
        )

    log.debug(f"Node.js version {current} is supported")
    return current


__all__ = ["parse_node_version", "check_node_version"]
