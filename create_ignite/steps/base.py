from enum import Enum
from os.path import join
from typing import Any, Optional

from create_ignite.log import get_logger
from create_ignite.proc.exec_log import ExecLog
from create_ignite.proc.process_manager import ProcessManager
from create_ignite.project.models import ProjectConfiguration
from create_ignite.project.options import FRAMEWORK_LABELS
from create_ignite.ui.base import StepSource, UIBase

log = get_logger(__name__)


class StepErrorCode(str, Enum):
    SCAFFOLD_FAILED = "SCAFFOLD_FAILED"
    INSTALL_FAILED = "INSTALL_FAILED"
    FRAMEWORK_SETUP_FAILED = "FRAMEWORK_SETUP_FAILED"
    GIT_INIT_FAILED = "GIT_INIT_FAILED"
    NODE_VERSION_TOO_LOW = "NODE_VERSION_TOO_LOW"


class StepError(Exception):
    """
    A project generation step failed.

    Attributes:
    * `message`: Human-readable description of the failure.
    * `code`: Which step failed (see `StepErrorCode`).
    * `exec_log`: Log of the failing external command, if any.
    """

    def __init__(self, message: str, code: StepErrorCode, exec_log: Optional[ExecLog] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.exec_log = exec_log


class BaseStep:
    """
    Base class for project generation steps.

    Each step works on the project folder `<root_dir>/<project_name>`
    and never changes the process working directory.
    """

    step_type: str
    display_name: str

    def __init__(
        self,
        config: ProjectConfiguration,
        ui: UIBase,
        process_manager: ProcessManager,
        *,
        root_dir: str,
    ):
        """
        Create a new step.

        :param config: Resolved project configuration.
        :param ui: UI to report progress to.
        :param process_manager: Process manager used to run external commands.
        :param root_dir: Directory in which the project folder is created.
        """
        self.ui_source = StepSource(self.display_name, self.step_type)
        self.config = config
        self.ui = ui
        self.process_manager = process_manager
        self.root_dir = root_dir

    @property
    def project_dir(self) -> str:
        """Full path to the project folder."""
        return join(self.root_dir, self.config.project_name)

    @property
    def template_context(self) -> dict[str, Any]:
        """Variables available to the project file templates."""
        config = self.config
        return {
            "project_name": config.project_name,
            "framework": config.framework.value,
            "framework_label": FRAMEWORK_LABELS[config.framework],
            "typescript": config.is_typescript,
            "ext": "ts" if config.is_typescript else "js",
            "jsx_ext": "tsx" if config.is_typescript else "jsx",
            "css_framework": config.css_framework.value,
            "package_manager": config.package_manager.value,
            "run_command": config.run_command,
        }

    async def send_message(self, message: str):
        """
        Send a message to the user, from this step.

        :param message: Message to send.
        """
        await self.ui.send_message(message, source=self.ui_source)

    async def warn(self, message: str):
        """
        Report a non-fatal problem to the user (and the log).

        :param message: Warning to show.
        """
        log.warning(message)
        await self.send_message(f"Warning: {message}")

    async def run_command(
        self,
        cmd: str,
        *,
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
        show_output: bool = True,
    ) -> ExecLog:
        """
        Run a command through the process manager.

        :param cmd: Command to run.
        :param cwd: Working directory relative to `root_dir` (default: project folder).
        :param timeout: Command timeout (default: process manager default).
        :param show_output: Relay command output to the UI.
        :return: Execution log of the command.
        """
        kwargs = {"timeout": timeout} if timeout else {}
        return await self.process_manager.run_command(
            cmd,
            cwd=cwd if cwd is not None else self.config.project_name,
            show_output=show_output,
            **kwargs,
        )

    async def run(self):
        """
        Run the step.

        :raises StepError: If the step failed.
        """
        raise NotImplementedError()


__all__ = ["StepErrorCode", "StepError", "BaseStep"]
