import asyncio
from os.path import join
from typing import Optional, Sequence

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from create_ignite.config import InstallConfig
from create_ignite.log import get_logger
from create_ignite.proc.exec_log import ExecLog
from create_ignite.project.dependencies import select_dependencies
from create_ignite.project.models import DependencyManifest
from create_ignite.project.options import Framework, PackageManager
from create_ignite.steps.base import BaseStep, StepError, StepErrorCode

log = get_logger(__name__)

FULLSTACK_FRONTEND_DIR = "apps/frontend"


def base_install_command(package_manager: PackageManager) -> str:
    return f"{package_manager.value} install"


def add_packages_command(package_manager: PackageManager, packages: Sequence[str], dev: bool = False) -> str:
    """
    Command adding packages to the project.

    :param package_manager: Package manager to use.
    :param packages: Packages to add.
    :param dev: Whether to add them as development dependencies.
    :return: Shell command.
    """
    if package_manager == PackageManager.NPM:
        parts = ["npm", "install"]
        if dev:
            parts.append("--save-dev")
    else:
        parts = [package_manager.value, "add"]
        if dev:
            parts.append("-D")
    return " ".join(parts + list(packages))


class Installer(BaseStep):
    """
    Install the project dependencies.

    Runs the base install for the scaffolded project, then adds the
    packages selected for the configuration. Every command is retried
    with exponential backoff before giving up.
    """

    step_type = "installer"
    display_name = "Installer"

    def __init__(
        self,
        *args,
        manifest: Optional[DependencyManifest] = None,
        install_config: Optional[InstallConfig] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.manifest = manifest if manifest is not None else select_dependencies(self.config)
        self.install_config = install_config or InstallConfig()

    async def run(self):
        pm = self.config.package_manager
        package_dir = self.config.project_name

        await self.send_message("Installing base dependencies...")
        await self.install(base_install_command(pm), cwd=package_dir)

        if self.config.framework == Framework.FULLSTACK:
            # selected packages belong to the frontend workspace
            package_dir = join(package_dir, FULLSTACK_FRONTEND_DIR)

        if self.manifest.dependencies:
            await self.send_message(f"Installing dependencies: {', '.join(self.manifest.dependencies)}")
            await self.install(add_packages_command(pm, self.manifest.dependencies), cwd=package_dir)

        if self.manifest.dev_dependencies:
            await self.send_message(f"Installing dev dependencies: {', '.join(self.manifest.dev_dependencies)}")
            await self.install(add_packages_command(pm, self.manifest.dev_dependencies, dev=True), cwd=package_dir)

        await self.send_message("Dependencies installed")

    async def install(self, cmd: str, *, cwd: str) -> ExecLog:
        """
        Run an install command, retrying on failure.

        The delay before each retry starts at `retry_delay` and doubles
        after every failed attempt.

        :param cmd: Install command.
        :param cwd: Working directory (relative to the root directory).
        :return: Log of the successful run.
        :raises StepError: If the command failed on every attempt.
        """

        async def wait_before_retry(seconds: float):
            await self.send_message(f"Install failed. Retrying in {seconds:g}s...")
            await asyncio.sleep(seconds)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.install_config.max_retries),
            wait=wait_exponential(multiplier=self.install_config.retry_delay),
            retry=retry_if_exception_type(StepError),
            sleep=wait_before_retry,
            reraise=True,
        )
        return await retrying(self.run_install, cmd, cwd=cwd)

    async def run_install(self, cmd: str, *, cwd: str) -> ExecLog:
        exec_log = await self.run_command(cmd, cwd=cwd, timeout=self.install_config.timeout)
        if not exec_log.success:
            log.warning(f"`{cmd}` failed with status {exec_log.status_code}")
            raise StepError(
                f"Failed to install dependencies: `{cmd}` failed with status {exec_log.status_code}: {exec_log.output}",
                StepErrorCode.INSTALL_FAILED,
                exec_log,
            )
        return exec_log


__all__ = ["base_install_command", "add_packages_command", "Installer"]
